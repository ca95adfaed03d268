"""Recipe schemas."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel


class IngredientAmount(BaseModel):
    """Structured ingredient with a numeric amount.

    Only real numbers are accepted as the amount; unknown keys are kept.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    name: str
    amount: StrictInt | StrictFloat | None = None
    unit: str | None = None
    note: str | None = None


# Plain dicts stay dicts so every key survives scaling; only model instances
# are kept as IngredientAmount.
Ingredient = Annotated[
    str | dict[str, Any] | IngredientAmount,
    Field(union_mode="left_to_right"),
]


class Recipe(BaseModel):
    """Recipe as produced by the recipe generator.

    Field names are accepted in snake_case or in the camelCase used by the
    generator's JSON (``recipeName``). Keys the model does not declare are
    kept and dumped back unchanged.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    recipe_name: str = Field(min_length=1)
    description: str | None = None
    ingredients: list[Ingredient] = Field(min_length=1)
    instructions: list[str] = Field(default_factory=list)
    servings: str | None = None
    prep_time: str | None = None
    cook_time: str | None = None
    estimated_time: str | None = None
    estimated_time_minutes: int | None = None
    nutritional_info: dict[str, Any] | None = None
    image_url: str | None = None
    image_generation: dict[str, Any] | None = None
    tips: dict[str, Any] | None = None
