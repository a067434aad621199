import argparse
import sys

from splitjoin import NODE_URL, log
from splitjoin.core import SplitJoinError, merge_into_one, split_by_bytes, split_into_parts


def run_split(args):
    destination = args.output or args.file
    parts = split_into_parts(args.file, args.parts, destination)
    for path in parts:
        print(path)
    log(f"Split {args.file} into {len(parts)} parts", context="LAUNCHER")


def run_split_bytes(args):
    destination = args.output or args.file
    parts = split_by_bytes(args.file, args.bytes, destination)
    for path in parts:
        print(path)
    log(f"Split {args.file} into {len(parts)} parts of {args.bytes} bytes", context="LAUNCHER")


def run_join(args):
    merge_into_one(args.parts, args.output)
    log(f"Merged {len(args.parts)} parts into {args.output}", context="LAUNCHER")


def run_serve(args):
    from splitjoin.nodes.node_storage import app
    log(f"Starting storage node on port {args.port}...", context="LAUNCHER")
    app.run(host=args.host, port=args.port)


def run_upload(args):
    from splitjoin.client.upload import upload_file
    manifest_path = upload_file(args.file, node_url=args.node, number_of_parts=args.parts, chunk_size=args.bytes)
    print(manifest_path)


def run_download(args):
    from splitjoin.client.download import download_file
    print(download_file(args.manifest, args.output))


def build_parser():
    parser = argparse.ArgumentParser(prog="splitjoin", description="Split files into parts and join them back")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("split", help="split a file into N parts")
    p.add_argument("file")
    p.add_argument("-n", "--parts", type=int, required=True)
    p.add_argument("-o", "--output", help="part prefix (defaults to the file path)")
    p.set_defaults(func=run_split)

    p = sub.add_parser("split-bytes", help="split a file into parts of a fixed byte size")
    p.add_argument("file")
    p.add_argument("-b", "--bytes", type=int, required=True)
    p.add_argument("-o", "--output", help="part prefix (defaults to the file path)")
    p.set_defaults(func=run_split_bytes)

    p = sub.add_parser("join", help="concatenate parts, in the order given, into one file")
    p.add_argument("output")
    p.add_argument("parts", nargs="+")
    p.set_defaults(func=run_join)

    p = sub.add_parser("serve", help="run a part storage node")
    p.add_argument("--host", default="0.0.0.0")
    p.add_argument("--port", type=int, default=5001)
    p.set_defaults(func=run_serve)

    p = sub.add_parser("upload", help="split a file and send its parts to a storage node")
    p.add_argument("file")
    size = p.add_mutually_exclusive_group(required=True)
    size.add_argument("-n", "--parts", type=int)
    size.add_argument("-b", "--bytes", type=int)
    p.add_argument("--node", default=NODE_URL)
    p.set_defaults(func=run_upload)

    p = sub.add_parser("download", help="fetch the parts listed in a manifest and join them")
    p.add_argument("manifest")
    p.add_argument("output")
    p.set_defaults(func=run_download)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except (SplitJoinError, OSError, ValueError) as e:
        log(f"[ERROR] {args.command} failed: {e}", context="LAUNCHER")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
