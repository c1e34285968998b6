from .sweat_result_model import READING_FIELDS, SweatReadings, SweatResult

__all__ = ["READING_FIELDS", "SweatReadings", "SweatResult"]
