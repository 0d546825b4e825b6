from docintel.fusion.engine import FusionEngine
from docintel.fusion.models import FusedRecord

__all__ = ["FusedRecord", "FusionEngine"]
