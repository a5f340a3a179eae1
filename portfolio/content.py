"""
Static portfolio content: profile card, skill categories, project gallery.

There is no database behind the site. The content lives here as plain
dataclasses and the /portfolio router serves it as JSON.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProfileStat:
    label: str
    value: str


@dataclass(frozen=True)
class Profile:
    name: str
    headline: str
    tagline: str
    bio: str
    email: str
    age: int
    location: str
    image: str
    resume_url: str
    stats: tuple[ProfileStat, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Skill:
    name: str
    icon: str  # emoji shown next to the name


@dataclass(frozen=True)
class SkillCategory:
    title: str
    skills: tuple[Skill, ...]


@dataclass(frozen=True)
class PortfolioItem:
    id: int
    title: str
    description: str
    link: str
    image: str
    open_in_new_tab: bool


def build_profile(owner: str) -> Profile:
    return Profile(
        name=owner,
        headline="Web Developer",
        tagline="Simple student who wants to be a developer even though it's hard",
        bio=(
            f"I'm {owner}, a Web Developer focusing on fast, scalable, and "
            "responsive front-end applications, specializing in the modern JS ecosystem."
        ),
        email="minguitokennethjohn@gmail.com",
        age=20,
        location="San Miguel Cordova, Cebu",
        image="/minguito.jpeg.jpg",
        resume_url="/kenneth-minguito-resume.pdf",
        stats=(
            ProfileStat("Posts", "19"),
            ProfileStat("Followers", "2,232"),
            ProfileStat("Following", "733"),
        ),
    )


SKILLS: tuple[SkillCategory, ...] = (
    SkillCategory("Frontend Development", (
        Skill("React / Next.js", "⚛️"),
        Skill("TypeScript / JavaScript", "ʦ"),
        Skill("Tailwind CSS / SCSS", "🌬️"),
        Skill("Responsive Design", "📱"),
        Skill("State Management (Context/Zustand)", "🔄"),
    )),
    SkillCategory("Backend & Database", (
        Skill("Node.js / Express", "🟢"),
        Skill("REST APIs / GraphQL", "🔗"),
        Skill("MongoDB / PostgreSQL", "🍃"),
        Skill("Firebase / Firestore", "🔥"),
    )),
    SkillCategory("Tools & Workflow", (
        Skill("Git & GitHub", "🐙"),
        Skill("VS Code", "💻"),
        Skill("Agile/Scrum", "🎯"),
        Skill("Docker (Basic)", "🐳"),
    )),
)


PROJECTS: tuple[PortfolioItem, ...] = (
    PortfolioItem(
        id=1,
        title="FCFS Scheduler Simulator",
        description="A simulator for visualizing First-Come, First-Served scheduling.",
        link="/fcfs/defaults",
        image="/minguito.jpeg.jpg",
        open_in_new_tab=True,
    ),
    PortfolioItem(
        id=2,
        title="E-Commerce Shop",
        description="Simple e-commerce mock-up with product browsing and checkout.",
        link="https://jake-finalproject.vercel.app/",
        image="/projects/ecommerce.png",
        open_in_new_tab=True,
    ),
    PortfolioItem(
        id=3,
        title="Digital Graphics App UI",
        description="UI/UX design for a mobile digital graphics editing application.",
        link="#",
        image="/placeholder-project-3.jpg",
        open_in_new_tab=False,
    ),
    PortfolioItem(
        id=4,
        title="Simple Blogging Platform",
        description="A full-stack blogging site with CRUD features.",
        link="#",
        image="/placeholder-project-4.jpg",
        open_in_new_tab=False,
    ),
)
