from .pipeline import Failed, Idle, Loading, PipelineState, Ready, ReceiptPipeline
from .presenter import receipt_table, show_state
