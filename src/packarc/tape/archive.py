'''
Archive directories to tape with packems, which bundles many small files
into large (~100GB) tar balls. Each archived directory gets an INDEX.txt
listing the packed files.
'''

import logging

from packarc.data.base import RunConfig
from packarc.misc.config import config as site_config
from packarc.tape import report
from packarc.tape.flow import cli_run

logger = logging.getLogger(__name__)


def config_from_args(args):
    '''
    Build the run configuration from the command line, falling back to the
    site configuration for anything not given.
    '''
    return RunConfig(
        'archive',
        base_source=args.source or site_config.PACKARC_SOURCE_BASE,
        base_destination=args.dest or site_config.PACKARC_ARCHIVE_BASE,
        base_staging=args.staging or site_config.PACKARC_STAGING_BASE,
        unit_names=site_config.PACKARC_DIRS if args.dirs is None else args.dirs,
        dry_run=args.dry_run,
        packing_target_size=site_config.PACKARC_TAR_TARGET_GB if args.target_size is None else args.target_size,
        packing_max_size=site_config.PACKARC_TAR_MAX_GB if args.max_size is None else args.max_size,
        username=site_config.USER,
        project=site_config.PACKARC_PROJECT,
    )


def cli(args, packer=None):
    try:
        run_config = config_from_args(args)
    except ValueError as e:
        report.configuration_errors([str(e)])
        return 1
    logger.debug('Run configuration: %s' % run_config)
    return cli_run(run_config, args, packer=packer)

# END
