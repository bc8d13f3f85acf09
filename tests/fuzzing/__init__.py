"""Randomized checks for Sprout."""

from .fuzz import Failure, Fuzzer, random_value, run_example, run_fuzzer

__all__ = ["Failure", "Fuzzer", "random_value", "run_example", "run_fuzzer"]
