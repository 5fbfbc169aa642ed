"""
CLI argument builder for the cargo.crates generation command.

Provides arguments for:
- The lockfile sources to merge
- The alignment mode of the generated block
- The output destination
"""

from cargo2port.cli.common_args import HELP_MESSAGES, add_universal_arguments
from cargo2port.formatter import AlignmentMode


def add_crates_arguments(parser):
    """Add the lockfile, alignment and output arguments.

    The alignment shortcuts (-m, -M, -j) and --align all write to ``align``
    and are mutually exclusive.

    Args:
        parser: The argparse parser.
    """
    parser.add_argument(
        "lockfiles",
        nargs="*",
        metavar="LOCKFILE",
        help=HELP_MESSAGES['lockfiles'],
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help=HELP_MESSAGES['output'],
    )

    alignment = parser.add_argument_group("Alignment")
    align_group = alignment.add_mutually_exclusive_group()
    align_group.add_argument(
        "--align",
        choices=AlignmentMode.values(),
        default=None,
        help=HELP_MESSAGES['align'],
    )
    align_group.add_argument(
        "-m", "--maxlen",
        action="store_const",
        const=AlignmentMode.MAXLEN.value,
        dest="align",
        help=HELP_MESSAGES['maxlen'],
    )
    align_group.add_argument(
        "-M", "--multiline",
        action="store_const",
        const=AlignmentMode.MULTILINE.value,
        dest="align",
        help=HELP_MESSAGES['multiline'],
    )
    align_group.add_argument(
        "-j", "--justify",
        action="store_const",
        const=AlignmentMode.JUSTIFY.value,
        dest="align",
        help=HELP_MESSAGES['justify'],
    )

    add_universal_arguments(parser)
    return parser
