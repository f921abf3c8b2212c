import shlex

from simple_slurm import Slurm

from packarc.misc.config import config as site_config

default_kwargs = {
    'archive': dict(
        job_name='archive_packems',
        time='48:00:00',
        mem='32G',
        output='archive_packems_%j.log',
        error='archive_packems_%j.err',
    ),
    'retrieve': dict(
        job_name='retrieve_packems',
        time='24:00:00',
        mem='16G',
        output='retrieve_packems_%j.log',
        error='retrieve_packems_%j.err',
    ),
}


def make_slurm(mode, account=None, partition=None, time=None, mem=None):
    '''
    Batch job for an archive or retrieve run. Unset options fall back to the
    per-mode defaults and the site configuration.
    '''
    kwargs = dict(default_kwargs[mode])
    kwargs['account'] = account or site_config.PACKARC_SLURM_ACCOUNT
    kwargs['partition'] = partition or site_config.PACKARC_SLURM_PARTITION
    if time:
        kwargs['time'] = time
    if mem:
        kwargs['mem'] = mem

    slurm = Slurm(**kwargs)
    slurm.set_shell('/bin/bash')
    slurm.add_cmd('set -e')
    slurm.add_cmd('module purge')
    for module in site_config.PACKARC_MODULES:
        slurm.add_cmd(f'module load {module}')
    return slurm


def job_command(config):
    '''
    The `packarc` command line that repeats this run inside a batch job. Every
    path is passed explicitly so the job does not depend on the environment of
    the compute node.
    '''
    cmd = ['packarc']
    if config.dry_run:
        cmd.append('--dry-run')
    cmd.append(config.mode)
    if config.mode == 'archive':
        cmd += [
            '--source', str(config.base_source),
            '--dest', str(config.base_destination),
            '--staging', str(config.base_staging),
            '--target-size', str(config.packing_target_size),
            '--max-size', str(config.packing_max_size),
        ]
    else:
        cmd += [
            '--archive', str(config.base_destination),
            '--restore', str(config.base_source),
            '--staging', str(config.base_staging),
        ]
    # Always given, so an empty list overrides PACKARC_DIRS on the node.
    cmd += ['--dirs', *config.unit_names]
    return shlex.join(cmd)
