from .purge_handler import register_purge_handler


def register_all_handlers(dp):
    register_purge_handler(dp)
