"""
Fehlerklassen des Ladenkontos
"""


class LedgerError(Exception):
    """Basisklasse aller fachlichen Fehler"""


class ConfigurationMissing(LedgerError):
    """
    Der Datenspeicher ist nicht konfiguriert.
    Enthält die Namen der fehlenden Einstellungen, damit der Aufrufer
    Einrichtungshinweise statt eines Stacktraces anzeigen kann.
    """

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Fehlende Konfiguration: {', '.join(missing)}")


class StoreError(LedgerError):
    """Eine Operation gegen den Datenspeicher ist fehlgeschlagen."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RecordNotFound(StoreError):
    """Datensatz existiert nicht (mehr)."""

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection}: Datensatz '{record_id}' nicht gefunden")


class DuplicateRecord(StoreError):
    """Datensatz mit dieser ID existiert bereits."""

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection}: '{record_id}' existiert bereits")
