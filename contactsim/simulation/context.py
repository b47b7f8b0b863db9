# contactsim/simulation/context.py

import simpy


class SimulationContext:
    """Clock and warmup state handed to the reports instead of global state."""

    def __init__(self, env: simpy.Environment, warmup_time: float = 0.0):
        self.env = env
        self.warmup_time = float(warmup_time)

    def now(self) -> float:
        return float(self.env.now)

    def is_warmup(self) -> bool:
        """True while the simulation clock is before the end of the warmup period."""
        return self.env.now < self.warmup_time
