from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .schemas import ProgrammingChannel


# language -> curated (name, url, subscribers, description), ranked; order matters
CHANNEL_TABLE: Dict[str, List[Tuple[str, str, str, str]]] = {
    "JavaScript": [
        ("Traversy Media", "https://www.youtube.com/@TraversyMedia", "2.1M", "Web development tutorials and courses"),
        ("The Net Ninja", "https://www.youtube.com/@NetNinja", "1.2M", "Modern web development tutorials"),
        ("Programming with Mosh", "https://www.youtube.com/@programmingwithmosh", "3.4M", "JavaScript and web development courses"),
        ("JavaScript Mastery", "https://www.youtube.com/@javascriptmastery", "1.5M", "Modern JavaScript, React, and full-stack projects"),
        ("Coding Addict", "https://www.youtube.com/@CodingAddict", "800K", "JavaScript fundamentals and practical projects"),
        ("Kevin Powell", "https://www.youtube.com/@KevinPowell", "900K", "CSS and JavaScript for front-end development"),
        ("Florin Pop", "https://www.youtube.com/@FlorinPop", "200K", "100 Days of Code challenges and JavaScript projects"),
        ("dcode", "https://www.youtube.com/@dcode-software", "400K", "JavaScript tutorials and web development tips"),
        ("Coding Train", "https://www.youtube.com/@TheCodingTrain", "1.6M", "Creative coding with JavaScript and p5.js"),
        ("Fun Fun Function", "https://www.youtube.com/@funfunfunction", "600K", "Functional programming and JavaScript concepts"),
        ("Wes Bos", "https://www.youtube.com/@WesBos", "400K", "JavaScript, CSS, and web development courses"),
        ("Clever Programmer", "https://www.youtube.com/@CleverProgrammer", "1.3M", "JavaScript projects and coding bootcamp content"),
        ("freeCodeCamp.org", "https://www.youtube.com/@freecodecamp", "8.1M", "Full-length programming courses and tutorials for all levels"),
        ("CodeWithHarry", "https://www.youtube.com/@CodeWithHarry", "4.5M", "Programming tutorials in Hindi and English, including JavaScript"),
    ],
    "Python": [
        ("Corey Schafer", "https://www.youtube.com/@coreyms", "1.1M", "Python tutorials and programming concepts"),
        ("Tech With Tim", "https://www.youtube.com/@TechWithTim", "1.8M", "Python programming tutorials and projects"),
        ("Programming with Mosh", "https://www.youtube.com/@programmingwithmosh", "3.4M", "Python for beginners and advanced concepts"),
        ("freeCodeCamp.org", "https://www.youtube.com/@freecodecamp", "8.1M", "Comprehensive Python courses and tutorials"),
        ("Sentdex", "https://www.youtube.com/@sentdex", "1.3M", "Python programming, machine learning, and data science"),
    ],
    "React": [
        ("Academind", "https://www.youtube.com/@academind", "1.1M", "React, JavaScript, and web development"),
        ("Dev Ed", "https://www.youtube.com/@developedbyed", "1.2M", "React tutorials and creative coding"),
        ("Web Dev Simplified", "https://www.youtube.com/@WebDevSimplified", "1.4M", "React and modern web development"),
        ("freeCodeCamp.org", "https://www.youtube.com/@freecodecamp", "8.1M", "React.js full courses and tutorials"),
    ],
    "Node.js": [
        ("The Net Ninja", "https://www.youtube.com/@NetNinja", "1.2M", "Node.js and backend development"),
        ("Traversy Media", "https://www.youtube.com/@TraversyMedia", "2.1M", "Full-stack development with Node.js"),
        ("Academind", "https://www.youtube.com/@academind", "1.1M", "Node.js and backend development tutorials"),
    ],
    "TypeScript": [
        ("Fireship", "https://www.youtube.com/@Fireship", "2.3M", "TypeScript and modern development"),
        ("Ben Awad", "https://www.youtube.com/@bawad", "1.1M", "TypeScript and React development"),
        ("freeCodeCamp.org", "https://www.youtube.com/@freecodecamp", "8.1M", "TypeScript crash courses and tutorials"),
    ],
    "Java": [
        ("Programming with Mosh", "https://www.youtube.com/@programmingwithmosh", "3.4M", "Java programming tutorials"),
        ("Amigoscode", "https://www.youtube.com/@amigoscode", "1.1M", "Java, Spring Boot, and backend development"),
        ("freeCodeCamp.org", "https://www.youtube.com/@freecodecamp", "8.1M", "Java programming tutorials and courses"),
    ],
    "C++": [
        ("The Cherno", "https://www.youtube.com/@TheCherno", "1.1M", "C++ programming and game development"),
        ("Programming with Mosh", "https://www.youtube.com/@programmingwithmosh", "3.4M", "C++ tutorials and concepts"),
        ("freeCodeCamp.org", "https://www.youtube.com/@freecodecamp", "8.1M", "C++ programming tutorials and courses"),
    ],
    "Go": [
        ("Tech With Tim", "https://www.youtube.com/@TechWithTim", "1.8M", "Go programming tutorials"),
        ("freeCodeCamp.org", "https://www.youtube.com/@freecodecamp", "8.1M", "Go programming tutorials and courses"),
    ],
    "Rust": [
        ("No Boilerplate", "https://www.youtube.com/@NoBoilerplate", "200K", "Rust programming tutorials"),
        ("Let's Get Rusty", "https://www.youtube.com/@letsgetrusty", "100K", "Rust programming tutorials and tips"),
    ],
    "PHP": [
        ("Traversy Media", "https://www.youtube.com/@TraversyMedia", "2.1M", "PHP and backend development"),
        ("Codecourse", "https://www.youtube.com/@Codecourse", "400K", "PHP and web development tutorials"),
    ],
    "Ruby": [
        ("Programming with Mosh", "https://www.youtube.com/@programmingwithmosh", "3.4M", "Ruby programming tutorials"),
        ("GoRails", "https://www.youtube.com/@GoRails", "60K", "Ruby on Rails screencasts and tutorials"),
    ],
}


def build_directory(table: Dict[str, Sequence[Tuple[str, str, str, str]]]) -> Dict[str, List[ProgrammingChannel]]:
    return {
        language: [
            ProgrammingChannel(name=name, url=url, subscribers=subscribers, description=description, language=language)
            for name, url, subscribers, description in rows
        ]
        for language, rows in table.items()
    }


class ChannelDirectory:
    """Curated YouTube channels per programming language."""

    def __init__(self, channels: Optional[Dict[str, List[ProgrammingChannel]]] = None) -> None:
        self._channels = build_directory(CHANNEL_TABLE) if channels is None else channels

    def languages(self) -> List[str]:
        return list(self._channels.keys())

    def get_channels(self, language: Optional[str] = None) -> List[ProgrammingChannel]:
        # Unknown or missing language means no filter; duplicates across languages are kept
        if language and language in self._channels:
            return list(self._channels[language])
        return [channel for rows in self._channels.values() for channel in rows]
