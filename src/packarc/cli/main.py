#!/usr/bin/env python
# coding: utf-8

'''
Archive directories to tape storage, and retrieve them again, using
packems/unpackems.
'''

import argparse
import logging
import signal
import sys

from packarc.misc.config import config
from packarc.tape import archive
from packarc.tape import retrieve

from pathlib import Path

logger = logging.getLogger('packarc')


def cli_config(args):
    from packarc.misc.config import cli
    return cli(args)


def _add_dry_run(p):
    # SUPPRESS keeps a `-n` given before the sub-command.
    p.add_argument(
        '-n', '--dry-run',
        dest='dry_run',
        action='store_true',
        default=argparse.SUPPRESS,
        help='Show what would be done without doing it.'
    )


def _add_batch_options(p, mode):
    p.add_argument(
        '--dump',
        help='Print the batch script to stdout.',
        action='store_true',
        default=False
    )
    p.add_argument(
        '--sbatch',
        help=f'Submit the {mode} as a Slurm job instead of running it here.',
        action='store_true',
        default=False
    )
    p.add_argument(
        '--account',
        help='Slurm account for --dump/--sbatch.',
        action='store',
        default=config.PACKARC_SLURM_ACCOUNT
    )
    p.add_argument(
        '--partition',
        help='Slurm partition for --dump/--sbatch.',
        action='store',
        default=config.PACKARC_SLURM_PARTITION
    )
    p.add_argument(
        '--time',
        help='Slurm time limit for --dump/--sbatch (per-mode default if not given).',
        action='store',
        default=None
    )
    p.add_argument(
        '--mem',
        help='Slurm memory request for --dump/--sbatch (per-mode default if not given).',
        action='store',
        default=None
    )


def get_parser():
    parser = argparse.ArgumentParser(
        prog='packarc',
        description=__doc__,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        '-n', '--dry-run',
        action='store_true',
        default=False,
        help='Show what would be done without doing it.'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase verbosity level (can be used multiple times). If once, set logging level to INFO, if twice or more, set to DEBUG.'
    )

    # ============================================================
    # Initialize Subparsers
    # ============================================================
    subparsers = parser.add_subparsers(help='sub-command help')

    parse_config = subparsers.add_parser(
        'config',
        help='View configuration settings.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parse_config.set_defaults(func=cli_config)
    parse_config.add_argument(
        '--list', '-l',
        help='List current configuration settings.',
        action='store_true',
        default=False,
    )

    # ============================================================
    # Archive
    # ============================================================
    parse_archive = subparsers.add_parser(
        'archive',
        help='Archive directories to tape using packems.',
        description=archive.__doc__,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parse_archive.set_defaults(func=archive.cli)
    _add_dry_run(parse_archive)
    parse_archive.add_argument(
        '--source',
        help='Base directory containing the subdirectories to archive.',
        action='store',
        type=Path,
        default=config.PACKARC_SOURCE_BASE
    )
    parse_archive.add_argument(
        '--dest',
        help='Base directory on the tape archive.',
        action='store',
        type=Path,
        default=config.PACKARC_ARCHIVE_BASE
    )
    parse_archive.add_argument(
        '--staging',
        help='Scratch directory for staging tar balls (needs enough space).',
        action='store',
        type=Path,
        default=config.PACKARC_STAGING_BASE
    )
    parse_archive.add_argument(
        '--dirs',
        help='Subdirectories of --source to archive, in order. If none are given, archive the entire source directory.',
        nargs='*',
        default=config.PACKARC_DIRS
    )
    parse_archive.add_argument(
        '--target-size', '-t',
        help='Target tar ball size in GB.',
        action='store',
        type=int,
        default=config.PACKARC_TAR_TARGET_GB
    )
    parse_archive.add_argument(
        '--max-size', '-m',
        help='Maximum tar ball size in GB.',
        action='store',
        type=int,
        default=config.PACKARC_TAR_MAX_GB
    )
    _add_batch_options(parse_archive, 'archive')

    # ============================================================
    # Retrieve
    # ============================================================
    parse_retrieve = subparsers.add_parser(
        'retrieve',
        help='Retrieve directories from tape using unpackems.',
        description=retrieve.__doc__,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parse_retrieve.set_defaults(func=retrieve.cli)
    _add_dry_run(parse_retrieve)
    parse_retrieve.add_argument(
        '--archive',
        help='Base directory on the tape archive (where the data was archived to).',
        action='store',
        type=Path,
        default=config.PACKARC_ARCHIVE_BASE
    )
    parse_retrieve.add_argument(
        '--restore',
        help='Base directory for the restored data.',
        action='store',
        type=Path,
        default=config.PACKARC_RESTORE_BASE
    )
    parse_retrieve.add_argument(
        '--staging',
        help='Scratch directory where the tar balls are staged.',
        action='store',
        type=Path,
        default=config.PACKARC_STAGING_BASE
    )
    parse_retrieve.add_argument(
        '--dirs',
        help='Subdirectories to retrieve, in order. If none are given, retrieve the entire archived directory.',
        nargs='*',
        default=config.PACKARC_DIRS
    )
    _add_batch_options(parse_retrieve, 'retrieve')

    return parser


def _terminate(signum, frame):
    # Raised inside subprocess.run, this also kills the running packems.
    raise SystemExit(128 + signum)


def main(argv=None):

    parser = get_parser()
    args = parser.parse_args(argv)

    # Initialize logger.
    if args.verbose >= 2:
        logger.setLevel(logging.DEBUG)
    elif args.verbose == 1:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(logging.WARNING)

    if args.verbose >= 2:
        logger.debug(f'Arguments: {args}')

    if not hasattr(args, 'func'):
        parser.print_usage(sys.stderr)
        print(f'{parser.prog}: error: a command is required (archive, retrieve or config)', file=sys.stderr)
        return 2

    previous = signal.signal(signal.SIGTERM, _terminate)
    try:
        res = args.func(args)
    except KeyboardInterrupt:
        print('ERROR: Interrupted, remaining units were not processed.', file=sys.stderr)
        return 128 + signal.SIGINT
    finally:
        if previous is not None:
            signal.signal(signal.SIGTERM, previous)

    return res


def main_archive(argv=None):
    '''
    Stand-alone `packarc-archive`, same as `packarc archive`.
    '''
    return main(['archive', *(sys.argv[1:] if argv is None else argv)])


def main_retrieve(argv=None):
    '''
    Stand-alone `packarc-retrieve`, same as `packarc retrieve`.
    '''
    return main(['retrieve', *(sys.argv[1:] if argv is None else argv)])
