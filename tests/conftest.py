import argparse

import pytest

from packarc.data.base import RunConfig
from packarc.misc.errors import ExternalToolFailure
from packarc.wrappers.packems import PackemsPacker


class RecordingPacker(PackemsPacker):
    '''
    Records pack/unpack calls instead of running packems/unpackems. Calls for
    a unit named in `fail_on` raise ExternalToolFailure.
    '''
    def __init__(self, fail_on=()):
        super().__init__(packems_exe='packems', unpackems_exe='unpackems')
        self.calls = []
        self.fail_on = set(fail_on)

    def pack(self, target_size, max_size, staging_dir, archive_dir, prefix, source_dir):
        self.calls.append(('pack', target_size, max_size, staging_dir, archive_dir, prefix, source_dir))
        if prefix in self.fail_on:
            raise ExternalToolFailure(self.pack_command(target_size, max_size, staging_dir, archive_dir, prefix, source_dir).cmd, 1)

    def unpack(self, destination_dir, staging_dir):
        self.calls.append(('unpack', destination_dir, staging_dir))
        if staging_dir.name in self.fail_on:
            raise ExternalToolFailure(self.unpack_command(destination_dir, staging_dir).cmd, 1)


@pytest.fixture
def packer():
    return RecordingPacker()


@pytest.fixture
def tree(tmp_path):
    '''
    A miniature work/scratch/arch layout:

        work/p/u/data/run1/file.nc
        scratch/u/u/packems_staging
        arch/p/u/data

    Only `work/p/u/data/run1` exists below the bases.
    '''
    work = tmp_path / 'work' / 'p' / 'u' / 'data'
    (work / 'run1').mkdir(parents=True)
    (work / 'run1' / 'file.nc').write_text('x' * 1024)
    return argparse.Namespace(
        root=tmp_path,
        work=work,
        staging=tmp_path / 'scratch' / 'u' / 'u' / 'packems_staging',
        arch=tmp_path / 'arch' / 'p' / 'u' / 'data',
        restore=tmp_path / 'work' / 'p' / 'u' / 'data_restored',
    )


@pytest.fixture
def make_config(tree):
    def _make_config(mode='archive', unit_names=(), dry_run=False, **kwargs):
        if mode == 'archive':
            defaults = dict(base_source=tree.work, base_destination=tree.arch, base_staging=tree.staging)
        else:
            defaults = dict(base_source=tree.restore, base_destination=tree.arch, base_staging=tree.staging)
        defaults.update(kwargs)
        return RunConfig(mode, unit_names=unit_names, dry_run=dry_run, username='u', project='p', **defaults)
    return _make_config


def snapshot(root):
    return sorted(str(p.relative_to(root)) for p in root.rglob('*'))


def strip_timestamps(text):
    return [
        line for line in text.splitlines()
        if not line.startswith(('Date:', 'Started:', 'Completed:'))
    ]
