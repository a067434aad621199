import os
import stat

from splitjoin import READ_BUFFER_SIZE
from splitjoin.core.errors import EmptyFileError, NotFoundError
from splitjoin.core.plan import plan_by_count, plan_by_size


def part_path(destination, index):
    return f"{destination}_{index}"


def _source_size(file_path):
    # os.stat raises FileNotFoundError for a missing path; let it through.
    st = os.stat(file_path)
    if not stat.S_ISREG(st.st_mode):
        raise NotFoundError(f"File does not exist: {file_path}")
    if st.st_size == 0:
        raise EmptyFileError(f"File is empty: {file_path}")
    return st.st_size


def split_into_parts(file_path, number_of_parts, destination):
    """
    Splits a file into N parts.

    Args:
        file_path (str): Path to the input file.
        number_of_parts (int): How many parts to cut the file into.
        destination (str): Prefix for the part files, written as <destination>_<index>.

    Returns:
        List[str]: Ordered list of part file paths.
    """
    size = _source_size(file_path)
    plan = plan_by_count(size, number_of_parts)
    return split_by_bytes(file_path, plan.chunk_size_in_bytes, destination)


def split_by_bytes(file_path, chunk_size_in_bytes, destination, buffer_size=None):
    """
    Splits a file into parts of chunk_size_in_bytes bytes; the last part holds the remainder.

    The source is streamed in buffers of buffer_size bytes (READ_BUFFER_SIZE
    by default), so memory use does not depend on the file size. A part is
    only opened once there is a byte to put in it, so a file ending on a
    chunk boundary never gets an empty trailing part.

    If reading or writing fails, the open part is closed and the error is
    raised; parts already written stay on disk.

    Args:
        file_path (str): Path to the input file.
        chunk_size_in_bytes (int): Size of each part in bytes.
        destination (str): Prefix for the part files, written as <destination>_<index>.
        buffer_size (int): Read buffer size in bytes.

    Returns:
        List[str]: Ordered list of part file paths.
    """
    size = _source_size(file_path)
    plan_by_size(size, chunk_size_in_bytes)
    buffer_size = buffer_size or READ_BUFFER_SIZE

    parts = []
    part = None
    current_path = None
    filled = 0

    try:
        with open(file_path, 'rb') as f:
            for buffer in iter(lambda: f.read(buffer_size), b""):
                view = memoryview(buffer)
                while view:
                    if part is None:
                        current_path = part_path(destination, len(parts))
                        part = open(current_path, 'wb')
                        filled = 0

                    length = min(chunk_size_in_bytes - filled, len(view))
                    part.write(view[:length])
                    view = view[length:]
                    filled += length

                    if filled == chunk_size_in_bytes:
                        part.close()
                        part = None
                        parts.append(current_path)

        if part is not None:
            part.close()
            part = None
            parts.append(current_path)
    finally:
        if part is not None:
            part.close()

    return parts
