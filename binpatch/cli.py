import argparse
import sys
from typing import List, Optional

from binpatch.constants import (
    BANNER, DEFAULT_LENGTH, DEFAULT_OFFSET, DEFAULT_PAD, DEFAULT_TYPE_TAG, EXIT_OK, TOOL_NAME
)
from binpatch.encoder import encode_payload, parse_integer
from binpatch.errors import PatchError, UsageError
from binpatch.patcher import patch_file
from binpatch.request import PatchRequest
from binpatch.utils import data_type_for, resolve_path


# Flags that always take the next token as their value, dash or not.
VALUE_FLAGS = ("-f", "-a", "-t", "-l", "-p", "-d")


class _BannerAction(argparse.Action):
    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        print(BANNER)


class PatchArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> PatchArgumentParser:
    parser = PatchArgumentParser(
        prog=TOOL_NAME,
        description="Overwrite bytes inside an existing binary file at a given offset."
    )
    parser.add_argument("-f", dest="file", metavar="PATH", help="Binary file to patch (required).")
    parser.add_argument("-a", dest="offset", metavar="OFFSET", default=str(DEFAULT_OFFSET),
                        help="Byte offset to write at, base 10.")
    parser.add_argument("-t", dest="type", metavar="TYPE", default=DEFAULT_TYPE_TAG,
                        help="Data type: db, dw, dd, dq or str. Anything else means db.")
    parser.add_argument("-l", dest="length", metavar="LENGTH", default=str(DEFAULT_LENGTH),
                        help="Output length for str data. Longer strings are truncated.")
    parser.add_argument("-p", dest="pad", metavar="PAD", default=str(DEFAULT_PAD),
                        help="Pad byte for str data, decimal or 0x-prefixed hex.")
    parser.add_argument("-d", dest="data", metavar="DATA",
                        help="Data to write (required). \\r and \\n are expanded.")
    parser.add_argument("-v", action=_BannerAction, help="Print the version banner and continue.")
    return parser


def build_request(args: argparse.Namespace) -> PatchRequest:
    if not args.file:
        raise UsageError("No binary file supplied.")

    return PatchRequest(
        file_path=resolve_path(args.file),
        offset=parse_integer(args.offset),
        data_type=data_type_for(args.type),
        length=parse_integer(args.length),
        pad_value=parse_integer(args.pad, base=0),
        raw_data=args.data,
    )


def run(request: PatchRequest) -> int:
    request.validate()
    payload = encode_payload(request)
    written = patch_file(request.file_path, request.offset, payload)
    print(f"[+] Patched {written} byte(s) at offset {request.offset} in '{request.file_path}'.")
    return written


def attach_values(argv: List[str]) -> List[str]:
    """
    Joins each value flag with the token after it ('-d', '-x' becomes '-d-x') so
    values that look like options are still taken as values.
    """
    attached = []
    tokens = iter(argv)
    for token in tokens:
        value = next(tokens, None) if token in VALUE_FLAGS else None
        if value is None:
            attached.append(token)
        elif value == "":
            attached.extend([token, value])
        else:
            attached.append(token + value)
    return attached


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    try:
        args, unknown = parser.parse_known_args(attach_values(argv))
        for token in unknown:
            print(f"[!] Ignoring unrecognized argument: {token}", file=sys.stderr)

        run(build_request(args))
    except PatchError as e:
        print(f"[!] {e}", file=sys.stderr)
        return e.exit_code

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
