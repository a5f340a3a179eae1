"""
Portfolio content endpoints.

GET /portfolio/profile  → Profile card (name, bio, contact details, stats)
GET /portfolio/skills   → Skill categories
GET /portfolio/projects → Project gallery

Read-only. The content is static and lives in portfolio/content.py.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from api.schemas.portfolio import PortfolioItemOut, ProfileOut, SkillCategoryOut
from config.settings import Settings
from portfolio.content import PROJECTS, SKILLS, build_profile

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("/profile", response_model=ProfileOut)
async def get_profile(settings: Settings = Depends(get_settings)) -> ProfileOut:
    return ProfileOut.model_validate(build_profile(settings.SITE_OWNER))


@router.get("/skills", response_model=list[SkillCategoryOut])
async def list_skills() -> list[SkillCategoryOut]:
    return [SkillCategoryOut.model_validate(category) for category in SKILLS]


@router.get("/projects", response_model=list[PortfolioItemOut])
async def list_projects() -> list[PortfolioItemOut]:
    """Project gallery, in display order."""
    return [PortfolioItemOut.model_validate(item) for item in PROJECTS]
