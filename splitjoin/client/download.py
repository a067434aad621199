# client/download.py
import os
import sys
import json
import requests

from splitjoin import DEFAULT_TIMEOUT, log
from splitjoin.core import merge_into_one
from splitjoin.client.upload import BASE_DIR

# Base paths
DOWNLOAD_DIR = os.path.join(BASE_DIR, "downloads")


def download_file(manifest_path, output_path):
    """
    Fetches the parts listed in a manifest, in order, and merges them into output_path.
    """
    with open(manifest_path, "r") as f:
        manifest = json.load(f)

    if not isinstance(manifest, dict) or "node" not in manifest or not isinstance(manifest.get("parts"), list):
        raise ValueError(f"Malformed manifest: {manifest_path}")

    node_url = manifest["node"]
    os.makedirs(DOWNLOAD_DIR, exist_ok=True)

    # Manifest order is the source file's byte order; never re-sort it.
    part_paths = []
    for part_id in manifest["parts"]:
        part_path = os.path.join(DOWNLOAD_DIR, part_id)
        try:
            r = requests.get(f"{node_url}/part/{part_id}", timeout=DEFAULT_TIMEOUT)
            r.raise_for_status()
        except requests.RequestException as e:
            log(f"Failed to download {part_id} from {node_url}: {e}", context="CLIENT")
            raise
        with open(part_path, "wb") as out_file:
            out_file.write(r.content)
        log(f"Downloaded {part_id} from {node_url}", context="CLIENT")
        part_paths.append(part_path)

    merge_into_one(part_paths, output_path)
    log(f"Reconstructed file saved at: {output_path}", context="CLIENT")
    return output_path


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python -m splitjoin.client.download <manifest> <output_path>")
        sys.exit(1)

    download_file(sys.argv[1], sys.argv[2])
