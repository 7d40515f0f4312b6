from .key_generator import generate_numeric_keys, generate_random_keys, generate_prefixed_keys
from .ip_generator import IPConfig, IPGenerator


class WorkLoad:
    def __init__(self, seed=None):
        self.seed = seed

    def numeric(self, num_keys):
        return generate_numeric_keys(num_keys)

    def random_keys(self, num_keys, unique=False, **kwargs):
        return generate_random_keys(num_keys, seed=self.seed, unique=unique, **kwargs)

    def prefixed(self, num_keys, prefixes, prefix_freq=0.5):
        return generate_prefixed_keys(num_keys, prefixes, seed=self.seed, prefix_freq=prefix_freq)

    def ips(self, num_ips, subnet_reuse=0.0):
        return IPGenerator(IPConfig(seed=self.seed, subnet_reuse=subnet_reuse)).batch(num_ips)

    def by_name(self, name, num_keys):
        """Dispatch used by the dashboard: ``numeric``, ``random`` or ``ips``."""
        if name == "numeric":
            return self.numeric(num_keys)
        if name == "random":
            return self.random_keys(num_keys)
        if name == "ips":
            return self.ips(num_keys, subnet_reuse=0.5)
        raise ValueError(f"unknown workload '{name}'")


__all__ = [
    "WorkLoad",
    "IPConfig",
    "IPGenerator",
    "generate_numeric_keys",
    "generate_random_keys",
    "generate_prefixed_keys",
]
