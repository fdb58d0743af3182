import importlib, os
from .analysis_model import AnalysisModel

def load_model() -> AnalysisModel:
    modpath = os.getenv("ANALYSIS_MODEL_MODULE")
    if not modpath:
        if os.getenv("ANALYSIS_ENDPOINT_URL"):
            from src.model_impl.remote_model import RemoteModel
            return RemoteModel()
        from src.model_impl.seeded_model import SeededModel
        return SeededModel()
    mod, factory = modpath.split(":")
    return getattr(importlib.import_module(mod), factory)()
