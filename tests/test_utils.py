import subprocess

from packarc.misc import utils


def _fake_du(returncode, stdout):
    def run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr='du: cannot read directory')
    return run


def test_disk_usage_of_directory(tmp_path):
    (tmp_path / 'file.nc').write_text('x' * 1024)
    assert utils.disk_usage(tmp_path)


def test_disk_usage_keeps_total_when_du_complains(monkeypatch):
    monkeypatch.setattr(utils.subprocess, 'run', _fake_du(1, '1.2T\t/work/p/u/data\n'))
    assert utils.disk_usage('/work/p/u/data') == '1.2T'


def test_disk_usage_without_output(monkeypatch):
    monkeypatch.setattr(utils.subprocess, 'run', _fake_du(1, ''))
    assert utils.disk_usage('/work/p/u/data') is None


def test_disk_usage_of_missing_path(tmp_path):
    assert utils.disk_usage(tmp_path / 'nope') is None


def test_head_stops_after_n_lines(tmp_path):
    index = tmp_path / 'INDEX.txt'
    index.write_text(''.join(f'line {i}\n' for i in range(30)))
    assert utils.head(index, 3) == ['line 0', 'line 1', 'line 2']
