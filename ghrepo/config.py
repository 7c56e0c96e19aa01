from pydantic_settings import BaseSettings

from .sorting import SortSpec, select_sort

# Example of an organization repos url: "https://api.github.com/orgs/gorilla/repos"
DEFAULT_GHURL = "https://api.github.com/users/phcurtis/repos"


class Settings(BaseSettings):
    ghurl: str = DEFAULT_GHURL
    verbose: int = 0
    show_version: bool = False
    ascending: bool = False
    by_pushed_at: bool = False
    by_updated_at: bool = False

    class Config:
        env_file = ".env"
        env_prefix = "GHREPO_"
        frozen = True

    @property
    def sort_spec(self) -> SortSpec:
        return select_sort(
            by_pushed_at=self.by_pushed_at,
            by_updated_at=self.by_updated_at,
            ascending=self.ascending,
        )
