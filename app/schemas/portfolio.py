from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Skills(BaseModel):
    frontend: list[str]
    backend: list[str]
    tools: list[str]


class Service(BaseModel):
    name: str
    description: str
    icon: str


class Project(BaseModel):
    name: str
    description: str
    technologies: list[str]
    link: str


class ContactInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str
    whatsapp: str
    whatsapp_link: str = Field(alias="whatsappLink")
    facebook: str
    instagram: str


class Portfolio(BaseModel):
    """Public profile document served by GET /api/portfolio."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    description: str
    skills: Skills
    services: list[Service]
    projects: list[Project]
    contact: ContactInfo
