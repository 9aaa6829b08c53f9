from .grid_demand import GridDemandUseCase, evaluate_targets

__all__ = ["GridDemandUseCase", "evaluate_targets"]
