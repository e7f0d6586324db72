# taqti/core/node.py

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
import logging


class Node(ABC):
    """
    Base class for analysis steps.

    A node takes a dictionary of inputs and returns a dictionary of outputs,
    so steps can be composed and driven from the CLI or the service alike.
    """

    def __init__(self, **kwargs):
        self.config = kwargs
        self.logger = logging.getLogger(self.__class__.__name__)
        self.name = self.__class__.__name__

    @abstractmethod
    def run(self, input_data: Dict[str, Any], context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Run this analysis step.

        Args:
            input_data: Data for this step
            context: Shared settings for the run, if any

        Returns:
            Output data of this step
        """
        pass

    def validate_input(self, input_data: Dict[str, Any]) -> bool:
        """
        Check that every required input key is present.

        Args:
            input_data: Inputs passed to run()

        Returns:
            True when every required key is present
        """
        return all(key in input_data for key in self.get_required_inputs())

    def get_required_inputs(self) -> list:
        return []

    def get_output_keys(self) -> list:
        return []

    def __str__(self):
        return f"{self.name}({self.config})"

    def __repr__(self):
        return self.__str__()
