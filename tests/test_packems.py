import subprocess

import pytest

from packarc.misc.errors import ExternalToolFailure
from packarc.wrappers.packems import Packems, PackemsPacker, Unpackems


def test_packems_cmdlist():
    packems = Packems(
        source_directory='/work/p/u/data/run1',
        pack_directory='/scratch/u/u/packems_staging/run1',
        archive_directory='/arch/p/u/data/run1',
        prefix='run1',
        target_size=100,
        max_size=110,
    )
    assert packems.cmdlist == [
        'packems',
        '-t', '100',
        '-m', '110',
        '-d', '/scratch/u/u/packems_staging/run1',
        '-S', '/arch/p/u/data/run1',
        '-o', 'run1',
        '/work/p/u/data/run1',
    ]


def test_packems_rejects_non_positive_sizes():
    with pytest.raises(ValueError):
        Packems('/a', '/b', '/c', 'x', target_size=0)


def test_unpackems_cmd_with_custom_executable():
    unpackems = Unpackems('/work/restored', '/scratch/staging/run1', executable_filepath='/sw/bin/unpackems')
    assert unpackems.cmd == '/sw/bin/unpackems -d /work/restored /scratch/staging/run1'


def test_pack_runs_executable(tmp_path):
    # `true` accepts and ignores any arguments.
    packer = PackemsPacker(packems_exe='true', unpackems_exe='true')
    packer.pack(100, 110, tmp_path / 'staging', tmp_path / 'arch', 'run1', tmp_path / 'src')
    packer.unpack(tmp_path / 'restore', tmp_path / 'staging')


def test_non_zero_exit_becomes_tool_failure(tmp_path):
    packer = PackemsPacker(packems_exe='false', unpackems_exe='false')
    with pytest.raises(ExternalToolFailure) as excinfo:
        packer.unpack(tmp_path / 'restore', tmp_path / 'staging')
    assert excinfo.value.returncode == 1
    assert isinstance(excinfo.value.__cause__, subprocess.CalledProcessError)


def test_missing_executable_becomes_tool_failure(tmp_path):
    packer = PackemsPacker(packems_exe=tmp_path / 'no-such-packems')
    with pytest.raises(ExternalToolFailure) as excinfo:
        packer.pack(100, 110, tmp_path / 'staging', tmp_path / 'arch', 'run1', tmp_path / 'src')
    assert excinfo.value.returncode is None
    assert 'Could not run' in str(excinfo.value)
