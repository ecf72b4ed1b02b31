from __future__ import annotations

from app.schemas.portfolio import ContactInfo, Portfolio, Project, Service, Skills

CONTACT_EMAIL = "kcaarun10@gmail.com"
CONTACT_WHATSAPP = "+977 98-10975653"

PORTFOLIO = Portfolio(
    name="Arun Regmi",
    title="Web Developer",
    description="Crafting fast, modern, accessible web experiences and useful online tools.",
    skills=Skills(
        frontend=["HTML/CSS", "JavaScript", "React/Vue"],
        backend=["Firebase", "Node.js", "Express"],
        tools=["GitHub", "Cloudflare", "UI/UX", "Performance", "SEO"],
    ),
    services=[
        Service(
            name="Web Development",
            description="Custom websites and web apps focused on speed, accessibility, and UX.",
            icon="fa-code",
        ),
        Service(
            name="Firebase Systems",
            description="Realtime databases, auth, storage, and scalable cloud functions.",
            icon="fa-fire",
        ),
        Service(
            name="GitHub Hosting",
            description="CI/CD, Pages, Actions, and modern deployment pipelines.",
            icon="fa-github",
        ),
        Service(
            name="UI/UX Design",
            description="Clean, intuitive interfaces with user-first design principles.",
            icon="fa-palette",
        ),
        Service(
            name="Domain & DNS",
            description="Cloudflare optimization, SSL, routing, and DNS best practices.",
            icon="fa-globe",
        ),
        Service(
            name="Online Tools",
            description="Custom tool development tailored to specific workflows.",
            icon="fa-tools",
        ),
    ],
    projects=[
        Project(
            name="Online Tools Suite",
            description=(
                "17+ tools including converters and generators with smooth UX and animations."
            ),
            technologies=["HTML/CSS", "JavaScript", "PDF.js"],
            link="tools.html",
        ),
        Project(
            name="E-commerce Platform",
            description="Full-featured e-commerce with payments, inventory, and admin dashboard.",
            technologies=["Firebase", "JavaScript", "Payments"],
            link="#",
        ),
        Project(
            name="AI Content Generator",
            description="Multi-template content generation with customization and export.",
            technologies=["AI API", "React", "Node"],
            link="#",
        ),
    ],
    contact=ContactInfo(
        email=CONTACT_EMAIL,
        whatsapp=CONTACT_WHATSAPP,
        whatsapp_link="https://wa.link/0mmt5c",
        facebook="https://www.facebook.com/aruna.regmi.262052",
        instagram="https://www.instagram.com/arunregmi.com.np/",
    ),
)


def get_portfolio() -> Portfolio:
    return PORTFOLIO
