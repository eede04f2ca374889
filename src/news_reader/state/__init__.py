"""Observable pipeline state consumed by presentation surfaces."""

from news_reader.state.coordinator import NewsStateCoordinator, PipelineState

__all__ = ["NewsStateCoordinator", "PipelineState"]
