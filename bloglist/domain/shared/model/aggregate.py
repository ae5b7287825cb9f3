from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base class for aggregate roots.

    Assignments are re-validated so field invariants hold after mutation too.
    """

    model_config = ConfigDict(validate_assignment=True)
