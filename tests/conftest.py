import pytest
import simpy

from contactsim.agents.host import Host
from contactsim.config.simulation_config import SimulationConfig
from contactsim.reports.connections_report import ConnectionsReport
from contactsim.simulation.context import SimulationContext
from contactsim.utils.position import Position


def advance(env: simpy.Environment, t: float) -> None:
    """Move the simulation clock forward to ``t``."""
    if t > env.now:
        env.run(until=t)


def make_host(address: int) -> Host:
    return Host(address=address, position=Position(0.0, 0.0))


@pytest.fixture
def env():
    return simpy.Environment()


@pytest.fixture
def context(env):
    return SimulationContext(env, warmup_time=0.0)


@pytest.fixture
def hosts():
    return [make_host(address) for address in range(4)]


@pytest.fixture
def report_factory(env):
    def factory(warmup_time=0.0, **settings):
        config = SimulationConfig(warmup_time=warmup_time, **settings)
        return ConnectionsReport(SimulationContext(env, warmup_time), config)
    return factory
