"""Static pools used by the deterministic refiner and the fallback snapshot."""
from __future__ import annotations

from typing import Dict, List

# Public profiles whose skills are representative of LinkedIn content themes
SEED_PROFILES: List[str] = [
    "williamhgates",
    "satyanadella",
    "jeffweiner08",
    "reidhoffman",
    "adamgrant",
    "melindagates",
]

DEFAULT_TOPIC_NAMES: List[str] = [
    "Remote Work",
    "AI in Business",
    "Personal Branding",
    "Leadership Skills",
    "Digital Transformation",
    "Work-Life Balance",
    "Career Development",
    "Data Analytics",
    "Sustainability",
    "Innovation Strategy",
    "Team Management",
    "Professional Networking",
]

# Cycled per topic by the standard refiner and appended as the baseline pool
# by the hashtag aggregator.
TRENDING_HASHTAGS: List[str] = [
    "#Leadership",
    "#Innovation",
    "#FutureOfWork",
    "#CareerGrowth",
    "#ArtificialIntelligence",
    "#DigitalTransformation",
    "#PersonalBranding",
    "#RemoteWork",
    "#Productivity",
    "#Networking",
    "#Sustainability",
    "#LinkedInTips",
]

FALLBACK_TOPICS: List[Dict] = [
    {
        "id": 1,
        "topic": "Remote Work",
        "description": "Discussions about hybrid work models and remote productivity",
        "engagement": 87,
        "growth": 12,
        "hashtags": ["#RemoteWork", "#HybridWork", "#FutureOfWork"],
        "relatedTopics": ["Work-Life Balance", "Digital Workspace Tools"],
    },
    {
        "id": 2,
        "topic": "AI in Business",
        "description": "How artificial intelligence is transforming business operations",
        "engagement": 93,
        "growth": 23,
        "hashtags": ["#AIBusiness", "#MachineLearning", "#BusinessInnovation"],
        "relatedTopics": ["Data Science", "Automation", "Digital Transformation"],
    },
    {
        "id": 3,
        "topic": "Personal Branding",
        "description": "Building and maintaining your professional online presence",
        "engagement": 78,
        "growth": 8,
        "hashtags": ["#PersonalBranding", "#LinkedInStrategy", "#ProfessionalGrowth"],
        "relatedTopics": ["Content Strategy", "LinkedIn Optimization", "Career Growth"],
    },
    {
        "id": 4,
        "topic": "Leadership Skills",
        "description": "Developing essential skills for modern leadership",
        "engagement": 82,
        "growth": 5,
        "hashtags": ["#Leadership", "#ManagementTips", "#TeamBuilding"],
        "relatedTopics": ["Emotional Intelligence", "Team Management", "Communication"],
    },
    {
        "id": 5,
        "topic": "Digital Transformation",
        "description": "How businesses are adapting to the digital landscape",
        "engagement": 89,
        "growth": 15,
        "hashtags": ["#DigitalTransformation", "#BusinessStrategy", "#Innovation"],
        "relatedTopics": ["Change Management", "Technology Adoption", "Business Models"],
    },
    {
        "id": 6,
        "topic": "Work-Life Balance",
        "description": "Strategies for maintaining balance in professional careers",
        "engagement": 76,
        "growth": 9,
        "hashtags": ["#WorkLifeBalance", "#Wellness", "#ProductivityTips"],
        "relatedTopics": ["Mental Health", "Productivity", "Self-Care"],
    },
]

FALLBACK_HASHTAGS: List[str] = [
    "#RemoteWork",
    "#FutureOfWork",
    "#AIBusiness",
    "#MachineLearning",
    "#PersonalBranding",
    "#LinkedInStrategy",
    "#Leadership",
    "#TeamBuilding",
    "#DigitalTransformation",
    "#Innovation",
    "#WorkLifeBalance",
    "#ProductivityTips",
]
