from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class CompletionRequest(BaseModel):
    index: str
    field: str
    prefix: str
    skip_duplicates: bool = True
    max_results: int = Field(10, ge=0)
    suggestion_name: Optional[str] = None

    @property
    def name(self) -> str:
        """Key the suggestion is filed under in request and response"""
        return self.suggestion_name or f"{self.field}_suggest"

    def to_suggest_body(self) -> Dict[str, Any]:
        """Build the `suggest` section of a search request"""
        return {
            self.name: {
                # Prefix goes out verbatim
                "text": self.prefix,
                "completion": {
                    "field": self.field,
                    "skip_duplicates": self.skip_duplicates,
                    "size": self.max_results
                }
            }
        }


class CompletionOption(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    suggested_text: str = Field(alias="text")
    score: float = Field(alias="_score")
    source_document: Dict[str, Any] = Field(default_factory=dict, alias="_source")
    index: Optional[str] = Field(None, alias="_index")
    document_id: Optional[str] = Field(None, alias="_id")


class CompletionEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    matched_prefix: str = Field(alias="text")
    offset: int
    length: int
    options: List[CompletionOption] = []


class CompletionResponse(BaseModel):
    entries: List[CompletionEntry] = []


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    elasticsearch_reachable: bool
    indexes_available: List[str]


class AutoCompleteResponse(BaseModel):
    query: str
    suggestions: List[str]
    total: int
