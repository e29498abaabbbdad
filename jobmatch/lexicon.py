"""
Skill lexicon: the canonical catalog of known skill names.

The catalog is read-only. One shared instance is built per process by
``default_lexicon()``. Callers can build their own ``SkillLexicon`` (or load
one from JSON) and hand it to the extractor.
"""

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from .config import LEXICON_PATH_ENV

logger = logging.getLogger(__name__)


SKILL_DATABASE: Tuple[str, ...] = (
    # Programming Languages
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "C", "Go", "Rust", "Swift",
    "Kotlin", "Ruby", "PHP", "Scala", "R", "MATLAB", "Perl", "Objective-C", "Dart", "Elixir",

    # Web Development
    "React", "Angular", "Vue.js", "Next.js", "Node.js", "Express", "Django", "Flask", "FastAPI",
    "Spring Boot", "ASP.NET", "Laravel", "Rails", "HTML", "CSS", "Tailwind CSS", "Bootstrap",
    "SASS", "LESS", "Webpack", "Vite", "Redux", "MobX", "GraphQL", "REST API", "WebSocket",

    # Mobile Development
    "React Native", "Flutter", "iOS Development", "Android Development", "SwiftUI", "Jetpack Compose",
    "Xamarin", "Ionic", "Cordova",

    # Databases
    "SQL", "PostgreSQL", "MySQL", "MongoDB", "Redis", "Cassandra", "DynamoDB", "Oracle",
    "Microsoft SQL Server", "SQLite", "Elasticsearch", "Neo4j", "Supabase", "Firebase",

    # Cloud & DevOps
    "AWS", "Azure", "Google Cloud", "Docker", "Kubernetes", "Jenkins", "GitLab CI", "GitHub Actions",
    "Terraform", "Ansible", "CircleCI", "Travis CI", "Heroku", "Vercel", "Netlify",

    # AI/ML
    "Machine Learning", "Deep Learning", "Neural Networks", "TensorFlow", "PyTorch", "Keras",
    "Scikit-learn", "NLP", "Computer Vision", "OpenCV", "NLTK", "spaCy", "Transformers",
    "LLM", "GPT", "BERT", "Data Science", "Statistics", "Pandas", "NumPy", "Matplotlib",

    # Data Engineering
    "ETL", "Data Pipeline", "Apache Spark", "Hadoop", "Airflow", "Kafka", "Data Warehouse",
    "BigQuery", "Snowflake", "Databricks", "dbt",

    # Testing
    "Jest", "Mocha", "Cypress", "Selenium", "Playwright", "JUnit", "PyTest", "Unit Testing",
    "Integration Testing", "E2E Testing", "Test Automation", "TDD", "BDD",

    # Tools & Methodologies
    "Git", "GitHub", "GitLab", "Bitbucket", "Agile", "Scrum", "Kanban", "Jira", "Confluence",
    "Figma", "Sketch", "Adobe XD", "Photoshop", "Illustrator", "CI/CD", "Microservices",

    # Security
    "Cybersecurity", "Penetration Testing", "Ethical Hacking", "OAuth", "JWT", "Encryption",
    "SSL/TLS", "OWASP", "Security Auditing",

    # Business & Analytics
    "Business Analysis", "Product Management", "Project Management", "Data Analysis",
    "Tableau", "Power BI", "Google Analytics", "Excel", "Financial Analysis", "Forecasting",

    # Soft Skills
    "Leadership", "Communication", "Teamwork", "Problem Solving", "Critical Thinking",
    "Collaboration", "Time Management", "Presentation", "Mentoring", "Strategic Planning",

    # Design
    "UI/UX Design", "Graphic Design", "Web Design", "Mobile Design", "Prototyping",
    "Wireframing", "User Research", "Usability Testing", "Design Systems", "Responsive Design",

    # Marketing & Sales
    "Digital Marketing", "SEO", "SEM", "Content Marketing", "Social Media Marketing",
    "Email Marketing", "Sales", "CRM", "Salesforce", "HubSpot",

    # Blockchain & Web3
    "Blockchain", "Ethereum", "Solidity", "Smart Contracts", "Web3", "DeFi", "NFT",

    # Game Development
    "Unity", "Unreal Engine", "Game Design", "3D Modeling", "Blender", "Maya",

    # Networking
    "TCP/IP", "DNS", "Network Security", "VPN", "Load Balancing", "CDN",

    # Other Technical
    "API Development", "Microservices Architecture", "System Design", "Distributed Systems",
    "Scalability", "Performance Optimization", "Code Review", "Technical Writing",
    "Documentation", "Debugging", "Refactoring", "Design Patterns", "OOP", "Functional Programming",

    # Industry-Specific
    "Healthcare IT", "FinTech", "E-commerce", "EdTech", "IoT", "AR/VR", "Embedded Systems",
    "Robotics", "Automotive", "Telecommunications", "Retail", "Manufacturing",

    # Certifications & Frameworks
    "PMP", "CISSP", "CEH", "CCNA", "CompTIA", "Six Sigma", "ITIL", "ISO 27001",

    # Additional Technical Skills
    "Linux", "Unix", "Shell Scripting", "Bash", "PowerShell", "VBA", "SAP", "ERP",
    "ServiceNow", "Workday", "Oracle EBS",

    # Emerging Technologies
    "Quantum Computing", "Edge Computing", "5G", "Automation", "RPA", "Low-Code", "No-Code",
)


class SkillLexicon:
    """Immutable, ordered catalog of canonical skill names."""

    __slots__ = ("_entries", "_by_key", "_positions")

    def __init__(self, entries: Iterable[str]):
        cleaned = []
        by_key = {}
        for entry in entries:
            if not isinstance(entry, str) or not entry.strip():
                raise ValueError(f"Invalid skill lexicon entry: {entry!r}")
            name = entry.strip()
            key = name.lower()
            if key in by_key:
                raise ValueError(
                    f"Duplicate skill lexicon entry {name!r} (already present as {by_key[key]!r})"
                )
            by_key[key] = name
            cleaned.append(name)
        self._entries = tuple(cleaned)
        self._by_key = by_key
        self._positions = {key: i for i, key in enumerate(by_key)}

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "SkillLexicon":
        """Load a lexicon from a JSON file holding a list of skill names."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Skill lexicon file {path} must contain a JSON list")
        lexicon = cls(data)
        logger.info(f"Loaded {len(lexicon)} skills from {path}")
        return lexicon

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries

    def canonical(self, name: str) -> Optional[str]:
        """Return the canonical spelling of ``name``, or None if unknown."""
        return self._by_key.get(name.strip().lower())

    def position(self, name: str) -> int:
        """Catalog index of a canonical name; used to order extracted skills."""
        return self._positions[name.strip().lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._by_key

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SkillLexicon({len(self._entries)} skills)"


@lru_cache(maxsize=1)
def default_lexicon() -> SkillLexicon:
    """Process-wide built-in lexicon."""
    return SkillLexicon(SKILL_DATABASE)


def load_lexicon() -> SkillLexicon:
    """Lexicon named by JOBMATCH_SKILL_LEXICON, or the built-in one."""
    path = os.getenv(LEXICON_PATH_ENV)
    if path:
        return SkillLexicon.from_json(path)
    return default_lexicon()
