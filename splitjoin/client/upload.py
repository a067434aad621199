import os
import sys
import json
import hashlib
import requests
from werkzeug.utils import secure_filename

from splitjoin import DEFAULT_TIMEOUT, NODE_URL, log
from splitjoin.core import split_by_bytes, split_into_parts

# Configuration
BASE_DIR = os.getenv("SPLITJOIN_WORK_DIR", os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
PART_DIR = os.path.join(BASE_DIR, "parts")
MANIFEST_DIR = os.path.join(BASE_DIR, "manifests")


def part_prefix_name(file_path):
    """
    File-system safe name for a source's parts and manifest.

    Names that secure_filename would empty or mangle (e.g. non-ASCII)
    get a digest of the original name appended so they stay distinct.
    """
    name = os.path.basename(file_path)
    safe = secure_filename(name)
    if safe == name:
        return safe
    digest = hashlib.sha256(name.encode("utf-8")).hexdigest()[:12]
    return f"{safe}-{digest}" if safe else digest


def upload_file(file_path, node_url=NODE_URL, number_of_parts=None, chunk_size=None):
    """
    Splits a file, sends every part to a storage node and records the part order.

    Exactly one of number_of_parts and chunk_size must be given.

    Returns:
        str: Path of the JSON manifest listing the part ids in order.
    """
    if (number_of_parts is None) == (chunk_size is None):
        raise ValueError("Give exactly one of number_of_parts or chunk_size")

    os.makedirs(PART_DIR, exist_ok=True)
    os.makedirs(MANIFEST_DIR, exist_ok=True)

    file_name = part_prefix_name(file_path)
    prefix = os.path.join(PART_DIR, file_name)

    log(f"Splitting file: {file_path}", context="CLIENT")
    if number_of_parts is not None:
        part_paths = split_into_parts(file_path, number_of_parts, prefix)
    else:
        part_paths = split_by_bytes(file_path, chunk_size, prefix)

    part_ids = []
    for part_path in part_paths:
        part_id = os.path.basename(part_path)
        try:
            with open(part_path, "rb") as part_file:
                response = requests.post(
                    f"{node_url}/store",
                    files={"part": part_file},
                    data={"part_id": part_id},
                    timeout=DEFAULT_TIMEOUT
                )
                response.raise_for_status()
        except requests.exceptions.RequestException as e:
            log(f"Upload failed for {part_id}: {e}", context="CLIENT")
            raise
        log(f"Uploaded {part_id} -> {node_url}", context="CLIENT")
        part_ids.append(part_id)

    manifest = {"file": file_name, "node": node_url, "parts": part_ids}
    manifest_path = os.path.join(MANIFEST_DIR, f"{file_name}.json")
    with open(manifest_path, "w") as f:
        json.dump(manifest, f, indent=2)

    log(f"File uploaded in {len(part_ids)} parts. Manifest saved at: {manifest_path}", context="CLIENT")
    return manifest_path


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python -m splitjoin.client.upload <file> <number_of_parts>")
        sys.exit(1)

    upload_file(sys.argv[1], number_of_parts=int(sys.argv[2]))
