from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DEPTH = 2
MAX_DEPTH = 4


class EvalWeights(BaseModel):
    """Constants of the future-occupancy model.

    rotation_share is the weight a cell hands to each of its four rotational
    images. empty_share scales that weight for empty cells, for both colors.
    Both were tuned by hand and are not a real probability law.
    """

    model_config = ConfigDict(frozen=True)

    rotation_share: float = Field(0.25, gt=0.0, le=1.0)
    empty_share: float = Field(0.33, gt=0.0, le=1.0)


class SearchSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    depth: int = Field(DEFAULT_DEPTH, ge=1, le=MAX_DEPTH)
    weights: EvalWeights = Field(default_factory=EvalWeights)


DEFAULT_WEIGHTS = EvalWeights()
