"""
JSON provider that serializes BSON values found in stored articles
"""
from bson import Decimal128, ObjectId
from flask.json.provider import DefaultJSONProvider


class MongoJSONProvider(DefaultJSONProvider):
    """Flask JSON provider aware of ObjectId and Decimal128 at any depth"""

    sort_keys = False

    @staticmethod
    def default(o):
        if isinstance(o, ObjectId):
            return str(o)
        if isinstance(o, Decimal128):
            return str(o.to_decimal())
        return DefaultJSONProvider.default(o)
