from .mongo import close_client, get_client, get_db, get_kv_collection

__all__ = ["close_client", "get_client", "get_db", "get_kv_collection"]
