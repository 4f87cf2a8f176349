"""
Dashboard agent base
One agent per dashboard step (ranking, statistics, area detail). The
orchestrator only ever calls run(); the domain engines do the work.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic
from loguru import logger

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """
    Wraps one domain engine for the pipeline.

    A subclass sets `name` and implements _process. run() rejects a missing
    input or result with ValueError, logs any failure under the agent's
    name and re-raises it, so the orchestrator decides what reaches the page.
    """

    name: str = "BaseAgent"

    def __init__(self):
        self.logger = logger.bind(agent=self.name)

    def run(self, input_data: InputT) -> OutputT:
        """
        Run this dashboard step.

        Args:
            input_data: area records (or a single area) plus step options

        Returns:
            the step's result model
        """
        try:
            self._validate_input(input_data)
            result = self._process(input_data)
            self._validate_output(result)
            return result

        except Exception as e:
            self.logger.error(f"{self.name} failed: {e}")
            raise

    @abstractmethod
    def _process(self, input_data: InputT) -> OutputT:
        """Hand the input to the engine"""
        pass

    def _validate_input(self, input_data: InputT) -> None:
        if input_data is None:
            raise ValueError(f"{self.name}: no areas given")

    def _validate_output(self, output_data: OutputT) -> None:
        if output_data is None:
            raise ValueError(f"{self.name}: engine returned nothing")
