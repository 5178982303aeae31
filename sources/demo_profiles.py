from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from config.settings import Settings, get_settings
from sources.registry import register


DEMO_PROFILES: List[Dict[str, str]] = [
    {
        "title": "Rajesh Kumar - Founder & CEO | TalentBridge Solutions",
        "link": "https://linkedin.com/in/rajesh-kumar-talentbridge",
        "snippet": "Experienced founder in the staffing industry with 8+ years of experience. Leading TalentBridge Solutions, a 75-employee recruitment firm based in Bangalore. Currently expanding operations across South India and looking to scale technology solutions.",
    },
    {
        "title": "Priya Sharma - Co-Founder | RecruitPro India",
        "link": "https://linkedin.com/in/priya-sharma-recruitpro",
        "snippet": "Co-founder of RecruitPro India, a growing staffing company with 60+ employees in Bangalore. Specializes in IT and engineering recruitment. Actively seeking partnerships and investment for rapid scaling across tier-2 cities.",
    },
    {
        "title": "Amit Patel - Founder | StaffingHub Bangalore",
        "link": "https://linkedin.com/in/amit-patel-staffinghub",
        "snippet": "Serial entrepreneur and founder of StaffingHub, a 85-person recruitment agency in Bangalore. Expert in healthcare and finance staffing. Currently fundraising for expansion and technology upgrades to scale operations.",
    },
    {
        "title": "Sneha Reddy - CEO & Founder | TalentFlow Solutions",
        "link": "https://linkedin.com/in/sneha-reddy-talentflow",
        "snippet": "Founder of TalentFlow Solutions with 90 employees across Bangalore and Hyderabad. Specializing in technical recruitment for startups and enterprises. Looking to scale through AI-powered recruitment tools and geographic expansion.",
    },
    {
        "title": "Vikram Singh - Founder | EliteStaff Recruiters",
        "link": "https://linkedin.com/in/vikram-singh-elitestaff",
        "snippet": "Founder of EliteStaff Recruiters, a boutique staffing firm with 55 employees in Bangalore. Focus on executive search and high-skilled placements. Exploring strategic partnerships and technology investments for business growth.",
    },
    {
        "title": "Kavitha Menon - Co-Founder | NextGen Staffing",
        "link": "https://linkedin.com/in/kavitha-menon-nextgen",
        "snippet": "Co-founder of NextGen Staffing with 70+ team members in Bangalore. Specializes in remote work placements and digital talent acquisition. Actively scaling operations and implementing new recruitment technologies.",
    },
    {
        "title": "Rohit Agarwal - Founder & Managing Director | ProHire Solutions",
        "link": "https://linkedin.com/in/rohit-agarwal-prohire",
        "snippet": "Managing Director of ProHire Solutions, a 80-employee staffing company in Bangalore. Expert in manufacturing and logistics recruitment. Currently expanding service offerings and seeking growth capital for market expansion.",
    },
    {
        "title": "Deepika Iyer - Founder | SkillBridge Recruitment",
        "link": "https://linkedin.com/in/deepika-iyer-skillbridge",
        "snippet": "Founder of SkillBridge Recruitment with 65 employees in Bangalore. Focuses on skill-based hiring for tech companies. Looking to scale through platform development and expansion into new industry verticals.",
    },
]


class DemoProfilesSource:
    """Offline source: canned profiles in SerpAPI's response shape."""

    source_name = "demo_profiles"

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def fetch(self, query: str, api_key: str, num: int) -> Dict[str, Any]:
        if self.settings.demo_delay_seconds > 0:
            # Simulated provider latency
            time.sleep(self.settings.demo_delay_seconds)
        items = [dict(p, position=i) for i, p in enumerate(DEMO_PROFILES[:num], start=1)]
        return {
            "search_parameters": {"q": query, "num": num},
            "organic_results": items,
        }


def _register():
    register(DemoProfilesSource.source_name, DemoProfilesSource)


_register()
