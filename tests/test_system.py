from types import SimpleNamespace
from unittest import mock

from nexusprover import system


def _freq(mhz):
    return [SimpleNamespace(current=mhz, min=0.0, max=0.0)]


@mock.patch("nexusprover.system.psutil.cpu_freq", return_value=_freq(2400.0))
def test_estimate_peak_gflops(_patched):
    gflops = system.estimate_peak_gflops(4)
    assert gflops > 0.0


@mock.patch("nexusprover.system.psutil.cpu_freq", return_value=_freq(2400.0))
def test_estimate_peak_gflops_scales_with_provers(_patched):
    assert system.estimate_peak_gflops(8) == 2 * system.estimate_peak_gflops(4)
    assert system.estimate_peak_gflops(0) == 0.0


@mock.patch("nexusprover.system.psutil.cpu_freq", return_value=_freq(2400.0))
def test_cpu_stats(_patched):
    cores, mhz = system.cpu_stats()
    assert cores > 0
    assert mhz == 2400
    assert cores == system.num_cores()


@mock.patch("nexusprover.system.psutil.cpu_freq", return_value=None)
def test_cpu_stats_without_frequency(_patched):
    cores, mhz = system.cpu_stats()
    assert cores >= 1
    assert mhz == 0


def test_num_cores_positive():
    assert system.num_cores() >= 1


def test_flops_per_cycle_is_known_width():
    assert system.flops_per_cycle_per_core() in {1, 4}


def test_bytes_to_mb():
    assert system.bytes_to_mb(1_048_576) == 1000
    assert system.bytes_to_mb(0) == 0
    assert system.bytes_to_mb(2 * 1_048_576) == 2 * system.bytes_to_mb(1_048_576)


def test_get_memory_info():
    program, total = system.get_memory_info()
    assert program > 0
    assert total > program


def test_memory_gb():
    total = system.total_memory_gb()
    assert total > 0.0
    assert 0.0 < system.process_memory_gb() < total


def test_measure_loop_reports_positive_rate():
    assert system._measure_gflops(1, 1000, 2) > 0.0