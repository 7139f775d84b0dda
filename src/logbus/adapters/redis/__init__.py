"""Redis adapter – symbolic error-code lookup."""
from logbus.adapters.redis.lookup import RedisCodeLookup

__all__ = ["RedisCodeLookup"]
