import shlex

from packarc.data.base import RunConfig
from packarc.misc import slurm


def test_archive_job_command_passes_every_path():
    cfg = RunConfig('archive', '/work/p/u/data', '/arch/p/u/data', '/scratch/u/u/staging',
                    unit_names=['run1', 'log'], packing_target_size=50, packing_max_size=60)
    assert shlex.split(slurm.job_command(cfg)) == [
        'packarc', 'archive',
        '--source', '/work/p/u/data',
        '--dest', '/arch/p/u/data',
        '--staging', '/scratch/u/u/staging',
        '--target-size', '50',
        '--max-size', '60',
        '--dirs', 'run1', 'log',
    ]


def test_retrieve_job_command_keeps_dry_run_and_empty_dirs():
    cfg = RunConfig('retrieve', '/work/p/u/restored', '/arch/p/u/my data', '/scratch/u/u/staging', dry_run=True)
    assert shlex.split(slurm.job_command(cfg)) == [
        'packarc', '--dry-run', 'retrieve',
        '--archive', '/arch/p/u/my data',
        '--restore', '/work/p/u/restored',
        '--staging', '/scratch/u/u/staging',
        '--dirs',
    ]


def test_make_slurm_defaults_per_mode():
    script = str(slurm.make_slurm('archive'))
    assert 'archive_packems' in script
    assert '32G' in script
    assert '48:00:00' in script

    script = str(slurm.make_slurm('retrieve', account='bb1469', mem='8G'))
    assert 'retrieve_packems' in script
    assert 'bb1469' in script
    assert '8G' in script
