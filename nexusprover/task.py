"""Prover task as handed out by the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """A proving task: orchestrator task ID, program ID and public inputs."""

    task_id: str
    program_id: str
    public_inputs: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.public_inputs, bytes):
            object.__setattr__(self, "public_inputs", bytes(self.public_inputs))

    def __str__(self) -> str:
        return (
            f"Task ID: {self.task_id}, Program ID: {self.program_id}, "
            f"Public Inputs: {list(self.public_inputs)}"
        )