import shutil
from contextlib import closing

from splitjoin import READ_BUFFER_SIZE
from splitjoin.core.errors import InvalidInputError


def _open_parts(part_paths):
    # One handle at a time; the next part opens only after the previous one is drained.
    for path in part_paths:
        with open(path, 'rb') as part:
            yield part


def merge_into_one(part_paths, destination):
    """
    Merges part files into one, in list order.

    Args:
        part_paths (List[str]): Ordered list of part file paths.
        destination (str): Path of the merged file; truncated if it exists.

    Returns:
        str: The destination path, once every part has been copied and the file closed.
    """
    if not part_paths:
        raise InvalidInputError("No parts to merge")

    with open(destination, 'wb') as out_file, closing(_open_parts(part_paths)) as parts:
        for part in parts:
            shutil.copyfileobj(part, out_file, READ_BUFFER_SIZE)

    return destination
