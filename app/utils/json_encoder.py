import json
from datetime import datetime, timezone
from bson.objectid import ObjectId


class JSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, ObjectId):
            return str(o)
        if isinstance(o, datetime):
            if o.tzinfo is not None:
                o = o.astimezone(timezone.utc).replace(tzinfo=None)
            return o.isoformat(timespec="milliseconds") + "Z"
        return json.JSONEncoder.default(self, o)
