from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int, info: ValidationInfo) -> int:
        if v < 1:
            raise ValueError(f"{info.field_name} must be >= 1")
        return v


# ----------------- COST MODELS ---------------------


class CostModelSquaredEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["squared_euclidean"] = "squared_euclidean"
    weighted: bool = False  # multiply traversal cost by the entered point's weight_scale


class CostModelEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["euclidean"] = "euclidean"
    weighted: bool = False


class CostModelManhattanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["manhattan"] = "manhattan"
    weighted: bool = False


class CostModelFunctionModel(BaseModel):
    """Cost functions looked up by name in the runtime cost-fn registry."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["function"] = "function"
    distance: str
    heuristic: str | None = None  # None => zero heuristic (Dijkstra)
    weighted: bool = False


CostModelUnion = Annotated[
    CostModelSquaredEuclideanModel
    | CostModelEuclideanModel
    | CostModelManhattanModel
    | CostModelFunctionModel,
    Field(discriminator="kind"),
]


# ----------------- SEARCH ---------------------


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    cost_model: CostModelUnion = Field(default_factory=CostModelSquaredEuclideanModel)
    max_expansions: int | None = None  # None => unlimited

    @field_validator("max_expansions")
    @classmethod
    def _positive(cls, v: int | None, info: ValidationInfo) -> int | None:
        if v is not None and v < 1:
            raise ValueError(f"{info.field_name} must be >= 1")
        return v


# ------------------------------------------------------------------


class AStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "astar"
    run_id: str = "local"
    search: SearchModel = Field(default_factory=SearchModel)
    log: LogModel = LogModel()
