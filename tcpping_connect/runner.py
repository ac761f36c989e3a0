"""Sequential probe loop and the fping -C compatible output line."""

from tcpping_connect.debug import log
from tcpping_connect.ping import Reachable, probe

EXIT_OK = 0
EXIT_LOSS = 1
EXIT_USAGE = 2


class SampleSeries:
    """Latency samples in attempt order. Append-only."""

    def __init__(self):
        self._samples = []

    def record(self, outcome):
        if isinstance(outcome, Reachable):
            self._samples.append(outcome.latency_ms)

    @property
    def samples(self):
        return tuple(self._samples)

    def __len__(self):
        return len(self._samples)

    def __iter__(self):
        return iter(self.samples)


def format_line(host, samples):
    return f"{host} :" + "".join(f" {ms:.3f}" for ms in samples)


def run(config, prober=probe):
    series = SampleSeries()
    for _ in range(config.count):
        series.record(prober(config.host, config.port, config.timeout))

    log(f"{config.host}:{config.port} {len(series)}/{config.count} samples", 'debug')
    if not series:
        return EXIT_LOSS, format_line(config.host, ())
    return EXIT_OK, format_line(config.host, series)
