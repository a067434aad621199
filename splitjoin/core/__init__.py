from splitjoin.core.errors import EmptyFileError, InvalidInputError, NotFoundError, SplitJoinError
from splitjoin.core.joiner import merge_into_one
from splitjoin.core.plan import ChunkPlan, plan_by_count, plan_by_size
from splitjoin.core.splitter import part_path, split_by_bytes, split_into_parts

__all__ = [
    "ChunkPlan",
    "EmptyFileError",
    "InvalidInputError",
    "NotFoundError",
    "SplitJoinError",
    "merge_into_one",
    "part_path",
    "plan_by_count",
    "plan_by_size",
    "split_by_bytes",
    "split_into_parts",
]
