from pydantic import BaseModel


class SearchParameters(BaseModel):
    city: str
    country: str
    # Accepted and carried through; not used for filtering yet.
    start_date: str
    end_date: str
    budget: float
