"""Configuration for the listings MCP server."""

from pydantic_settings import BaseSettings


class ListingsConfig(BaseSettings):
    data_path: str = "listings.csv"
    export_dir: str = "exports"
    ranking_limit: int = 10
    sample_size: int = 5

    model_config = {"env_prefix": "LISTINGS_"}
