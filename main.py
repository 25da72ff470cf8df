import argparse
import sys

from chunk_errors import PngError
from chunk_model import ChunkModel
from chunk_type import ChunkType
from png_funs import read_png, write_png


def chunk_type_arg(value):
    try:
        return ChunkType.from_string(value)
    except PngError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="png-message", description="Hide messages in PNG chunks"
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    commands = parser.add_subparsers(dest="command")

    encode = commands.add_parser("encode", help="append a message chunk")
    encode.add_argument("-p", "--png", required=True)
    encode.add_argument("-m", "--message", required=True)
    encode.add_argument("-c", "--chunk-type", required=True, type=chunk_type_arg)
    encode.add_argument("-o", "--output")

    decode = commands.add_parser("decode", help="print a chunk's message")
    decode.add_argument("-p", "--png", required=True)
    decode.add_argument("-c", "--chunk-type", required=True, type=chunk_type_arg)

    remove = commands.add_parser("remove", help="remove a chunk")
    remove.add_argument("-p", "--png", required=True)
    remove.add_argument("-c", "--chunk-type", required=True, type=chunk_type_arg)
    remove.add_argument("-o", "--output")

    show = commands.add_parser("print", help="print every chunk")
    show.add_argument("-p", "--png", required=True)

    return parser


def encode(args):
    png = read_png(args.png)
    chunk = ChunkModel.encode(args.chunk_type, args.message.encode("utf-8"))
    png.append_chunk(chunk)

    if args.output:
        write_png(png, args.output)
        print(f"Chunk {args.chunk_type} written to {args.output}")
    else:
        print(png)


def decode(args):
    png = read_png(args.png)
    chunk = png.chunk_by_type(str(args.chunk_type))
    if chunk is None:
        print("Chunk not found")
    else:
        print(chunk.data_as_string())


def remove(args):
    png = read_png(args.png)
    removed_chunk = png.remove_chunk(str(args.chunk_type))
    print(removed_chunk)

    if args.output:
        write_png(png, args.output)


def print_png(args):
    print(read_png(args.png))


COMMANDS = {
    "encode": encode,
    "decode": decode,
    "remove": remove,
    "print": print_png,
}


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.command is None:
        print("No command provided")
        return 0

    try:
        COMMANDS[args.command](args)
    except (PngError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
