"""Execution: client abstraction and paper (in-memory) implementation."""

from gtrade_sim.execution.base import ExecutionClient, OrderRequest, TradeExecution
from gtrade_sim.execution.paper import PaperExecutionClient

__all__ = ["ExecutionClient", "OrderRequest", "TradeExecution", "PaperExecutionClient"]
