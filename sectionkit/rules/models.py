from pydantic import BaseModel, Field


class ContentRules(BaseModel):
    default_length: int = Field(default=300, ge=0)
    truncation_marker: str = " . . ."
    read_more_label: str = "Read More"

class PathRules(BaseModel):
    read_more: str = "posts"
    api: str = "/api/posts"
    redirect: str = "/posts"

class FilterRules(BaseModel):
    header_tag: str = "section-header"

class SlideshowRules(BaseModel):
    interval_ms: int = Field(default=5000, gt=0)
    empty_title: str = ""
    empty_message: str = ""

class DeleteRules(BaseModel):
    confirm_message: str = "Are you sure you want to delete this post?"

class SectionRules(BaseModel):
    content: ContentRules = Field(default_factory=ContentRules)
    paths: PathRules = Field(default_factory=PathRules)
    filter: FilterRules = Field(default_factory=FilterRules)
    slideshow: SlideshowRules = Field(default_factory=SlideshowRules)
    delete: DeleteRules = Field(default_factory=DeleteRules)
