class FinanceTrackerError(Exception):
    """Base class for errors raised by the service layer."""


class NotFoundError(FinanceTrackerError):
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class ConflictError(FinanceTrackerError):
    pass


class StoreClosedError(FinanceTrackerError):
    pass
