from config import Config


class AreaMapper:
    """Static lookup from an area of interest to its suggested sub-fields"""

    def __init__(self, mapping=None):
        mapping = Config.AREA_MAPPING if mapping is None else mapping
        self._mapping = {area: tuple(fields) for area, fields in mapping.items()}

    def get_suggestions(self, area):
        # Unknown areas are still reported, just without suggestions
        return list(self._mapping.get(area, ()))
