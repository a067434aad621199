import shutil
import os
from flask import Flask, request, send_file, jsonify
from werkzeug.utils import secure_filename

from splitjoin import log

app = Flask(__name__)

# Directory where parts will be stored
STORAGE_DIR = os.getenv(
    "SPLITJOIN_STORAGE_DIR",
    os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'node_storage'))
)


def _part_location(part_id):
    if not part_id or secure_filename(part_id) != part_id:
        return None
    return os.path.join(STORAGE_DIR, part_id)


def _existing_part(part_id):
    part_path = _part_location(part_id)
    if part_path is not None and os.path.isfile(part_path):
        return part_path
    return None


def _not_found(part_id):
    return jsonify({"error": "Part not found", "part_id": part_id}), 404


@app.route('/store', methods=['POST'])
def store_part():
    """
    Saves the uploaded file field 'part' under the form field 'part_id'.

    An existing part with the same id is replaced.
    """
    part_id = request.form.get('part_id')
    upload = request.files.get('part')
    if not part_id or upload is None:
        return jsonify({"error": "Missing part_id or part"}), 400

    part_path = _part_location(part_id)
    if part_path is None:
        log(f"Rejected part id {part_id!r}", context="NODE")
        return jsonify({"error": "Invalid part_id"}), 400

    os.makedirs(STORAGE_DIR, exist_ok=True)
    upload.save(part_path)
    log(f"Stored {part_id}", context="NODE")
    return jsonify({"status": "stored", "part_id": part_id})


@app.route('/status', methods=['GET'])
def node_status():
    """
    Returns current free disk space and number of stored parts.
    """
    os.makedirs(STORAGE_DIR, exist_ok=True)
    try:
        free_bytes = shutil.disk_usage(STORAGE_DIR).free
        part_count = sum(1 for entry in os.scandir(STORAGE_DIR) if entry.is_file())
    except OSError as e:
        log(f"Status check failed for {STORAGE_DIR}: {e}", context="NODE")
        return jsonify({"error": "Status unavailable", "details": str(e)}), 500

    return jsonify({"free_mb": round(free_bytes / 2 ** 20, 2), "part_count": part_count})


@app.route('/part/<part_id>', methods=['GET'])
def get_part(part_id):
    """Streams the stored bytes of one part."""
    part_path = _existing_part(part_id)
    if part_path is None:
        return _not_found(part_id)
    return send_file(part_path, mimetype="application/octet-stream", as_attachment=True, download_name=part_id)


@app.route('/part/<part_id>', methods=['DELETE'])
def delete_part(part_id):
    part_path = _existing_part(part_id)
    if part_path is None:
        return _not_found(part_id)
    os.remove(part_path)
    log(f"Deleted {part_id}", context="NODE")
    return jsonify({"status": "deleted", "part_id": part_id})


if __name__ == '__main__':
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument('--port', type=int, default=5001, help='Port for this node to run on')
    args = parser.parse_args()

    app.run(host='0.0.0.0', port=args.port)
