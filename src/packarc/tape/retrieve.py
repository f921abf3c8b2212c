'''
Retrieve directories from tape with unpackems. Restores data that was
archived with `packarc archive`.
'''

import logging

from packarc.data.base import RunConfig
from packarc.misc.config import config as site_config
from packarc.tape import report
from packarc.tape.flow import cli_run

logger = logging.getLogger(__name__)


def config_from_args(args):
    return RunConfig(
        'retrieve',
        base_source=args.restore or site_config.PACKARC_RESTORE_BASE,
        base_destination=args.archive or site_config.PACKARC_ARCHIVE_BASE,
        base_staging=args.staging or site_config.PACKARC_STAGING_BASE,
        unit_names=site_config.PACKARC_DIRS if args.dirs is None else args.dirs,
        dry_run=args.dry_run,
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
