'''
The run itself: validate, resolve, dispatch every unit in order, summarize.

    Start -> Validate -> {Aborted | Resolve} -> Dispatch(1..n) -> Summarize

Aborted runs exit 1. Completed runs exit 0, dry-run or not.
'''

import logging

from packarc.misc import slurm
from packarc.misc.errors import ConfigurationError, ExternalToolFailure
from packarc.tape import report
from packarc.tape.dispatch import dispatch_all
from packarc.tape.resolve import resolve
from packarc.tape.validate import validate
from packarc.wrappers.packems import PackemsPacker

logger = logging.getLogger(__name__)


def run(config, packer=None):
    '''
    Archive or retrieve according to `config.mode`.

    Parameters
    ----------
    config : RunConfig
    packer : object with `pack`, `unpack`, `pack_command` and `unpack_command`
        Defaults to the real packems/unpackems tools.

    Returns
    -------
    list of UnitResult

    Raises
    ------
    ConfigurationError
        Before anything is dispatched.
    ExternalToolFailure
        From the first failing unit; later units are not processed.
    '''
    if packer is None:
        packer = PackemsPacker()

    report.banner(config)

    result = validate(config)
    if not result.ok:
        raise ConfigurationError(result.problems)

    units = resolve(config)
    logger.info('Resolved %d unit(s): %s' % (len(units), ', '.join(u.name for u in units)))

    if not config.dry_run:
        # Archive stages under the scratch base, retrieve restores under the
        # work tree.
        base = config.base_staging if config.mode == 'archive' else config.base_source
        base.mkdir(parents=True, exist_ok=True)

    results = dispatch_all(units, config, packer)

    report.summary(config)
    return results


def cli_run(config, args, packer=None):
    '''
    Shared tail of `packarc archive` and `packarc retrieve`: dump or submit a
    batch job, or run here and turn errors into an exit code.
    '''
    if args.dump or args.sbatch:
        job = slurm.make_slurm(
            config.mode,
            account=args.account,
            partition=args.partition,
            time=args.time,
            mem=args.mem,
        )
        cmd = slurm.job_command(config)
        if args.dump:
            print(job)
            print(cmd)
        if args.sbatch:
            job_id = job.sbatch(cmd)
            logger.info('Submitted %s job %s' % (config.mode, job_id))
        return 0

    try:
        run(config, packer=packer)
    except ConfigurationError as e:
        report.configuration_errors(e.problems)
        return 1
    except ExternalToolFailure as e:
        report.errors([str(e)])
        return 1

    return 0

# END
