from carbay.infra.db.models.storage_entry import StorageEntryRow

__all__ = ["StorageEntryRow"]
