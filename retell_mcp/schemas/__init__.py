"""Tool argument and result contracts, one module per Retell resource."""

from retell_mcp.schemas.base import DeletionOutput, NoArguments, OutputRecord, ToolInput
from retell_mcp.schemas.conversation_flows import FlowNode
from retell_mcp.schemas.variants import (
    AnalysisData,
    KnowledgeBaseSource,
    ResponseEngine,
    ToolDefinition,
    TransferDestination,
)

__all__ = [
    "AnalysisData",
    "DeletionOutput",
    "FlowNode",
    "KnowledgeBaseSource",
    "NoArguments",
    "OutputRecord",
    "ResponseEngine",
    "ToolDefinition",
    "ToolInput",
    "TransferDestination",
]
