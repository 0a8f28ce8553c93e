from selectorkit.objects.rectangle import Rectangle
from selectorkit.objects.serialization import from_json, to_json

__all__ = ["Rectangle", "to_json", "from_json"]
