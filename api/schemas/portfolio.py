"""
Pydantic schemas for the /portfolio endpoints.

All read from the frozen dataclasses in portfolio.content
(from_attributes=True), so the content module stays free of pydantic.
"""

from pydantic import BaseModel


class ProfileStatOut(BaseModel):
    label: str
    value: str

    model_config = {"from_attributes": True}


class ProfileOut(BaseModel):
    name: str
    headline: str
    tagline: str
    bio: str
    email: str
    age: int
    location: str
    image: str
    resume_url: str
    stats: list[ProfileStatOut]

    model_config = {"from_attributes": True}


class SkillOut(BaseModel):
    name: str
    icon: str

    model_config = {"from_attributes": True}


class SkillCategoryOut(BaseModel):
    title: str
    skills: list[SkillOut]

    model_config = {"from_attributes": True}


class PortfolioItemOut(BaseModel):
    id: int
    title: str
    description: str
    link: str
    image: str
    open_in_new_tab: bool

    model_config = {"from_attributes": True}
