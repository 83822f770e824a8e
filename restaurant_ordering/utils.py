import json
from pathlib import Path
from typing import Callable, Union

from pydantic import BaseModel, RootModel, ValidationError


def get_input(
    input_message: str,
    fn_validation: Callable,
    error_message: str = "Invalid input",
    cast: Callable = int,
):
    """Prompt until the user types a value accepted by ``fn_validation``.

    - input_message: prompt shown to the user
    - fn_validation: predicate taking the parsed value and returning True if valid
    - error_message: message displayed on invalid input
    - cast: conversion applied to the stripped answer (``int`` by default)
    """
    while True:
        try:
            result = cast(input(input_message).strip())
            if fn_validation(result):
                return result
        except ValueError:
            pass
        print(error_message)


def load_and_validate(data_path: Path, model: Union[RootModel, BaseModel]) -> BaseModel:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Catalog data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
    try:
        return model.model_validate(raw_data)
    except ValidationError as e:
        raise ValueError(f"Validation error for {data_path.name}: {e}")
