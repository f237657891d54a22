from advanced_search.core.config_vars.config_assembler import SearchConfigAssembler

__all__ = ["SearchConfigAssembler"]
