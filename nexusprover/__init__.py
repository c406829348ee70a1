"""Prover node helpers: tasks, a task cache, system measurements, a Fibonacci program, release checks and dashboard text."""

__version__ = "0.9.7"

__all__ = ["dashboard", "fib", "system", "task", "task_cache", "version_checker"]