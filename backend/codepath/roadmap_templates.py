"""
Static curriculum templates used by the roadmap composer.

Each template is an ordered list of step records keyed by primary interest.
Records are plain dicts; the composer validates fresh RoadmapStep models from
them on every request so no response shares state with these tables.
"""

from typing import Any, Dict, List


FRAMEWORK_STEP_ID = "5"
REACT_FRAMEWORK_DESCRIPTION = "Learn React.js"

_FREECODECAMP_CHANNEL = {
    "name": "freeCodeCamp.org",
    "url": "https://www.youtube.com/@freecodecamp",
    "subscribers": "8.1M",
    "description": "Full-length programming courses and tutorials for all levels",
}
_TRAVERSY_CHANNEL = {
    "name": "Traversy Media",
    "url": "https://www.youtube.com/@TraversyMedia",
    "subscribers": "2.1M",
    "description": "Web development tutorials and courses",
}
_MDN_DOCS = {
    "name": "MDN Web Docs",
    "url": "https://developer.mozilla.org/en-US/docs/Learn",
    "description": "The reference for HTML, CSS and JavaScript",
}
_WEB_COMMUNITIES = [
    {"name": "r/webdev", "url": "https://www.reddit.com/r/webdev/", "description": "Web development news and help threads"},
    {"name": "freeCodeCamp Forum", "url": "https://forum.freecodecamp.org/", "description": "Beginner-friendly questions and code reviews"},
]


WEB_DEVELOPMENT_STEPS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Web Development Fundamentals",
        "description": "Learn the basics of how the web works and essential concepts",
        "duration": "1-2 weeks",
        "difficulty": "beginner",
        "type": "theory",
        "resources": [
            {"type": "video", "title": "How the Web Works", "url": "https://www.youtube.com/watch?v=hJHvdBlSxug", "duration": "2 hours"},
            {"type": "article", "title": "Web Development Roadmap", "url": "https://roadmap.sh/frontend", "duration": "1 hour"},
            {"type": "course", "title": "HTML & CSS Basics", "url": "https://www.freecodecamp.org/learn", "duration": "10 hours"},
            {"type": "article", "title": "How the Internet Works", "url": "https://developer.mozilla.org/en-US/docs/Learn/Common_questions/Web_mechanics/How_does_the_Internet_work", "duration": "30 minutes"},
        ],
        "skills": ["HTML", "CSS", "Web Concepts", "Browser DevTools"],
        "prerequisites": [],
        "learning_resources": {
            "youtube_channels": [_TRAVERSY_CHANNEL, _FREECODECAMP_CHANNEL],
            "documentation": [_MDN_DOCS],
            "books": [
                {"title": "HTML and CSS: Design and Build Websites", "author": "Jon Duckett", "free": False},
            ],
            "practice_websites": [
                {"name": "freeCodeCamp", "url": "https://www.freecodecamp.org/learn", "description": "Guided HTML and CSS exercises", "difficulty": "Beginner"},
            ],
            "communities": _WEB_COMMUNITIES,
        },
    },
    {
        "id": "2",
        "title": "HTML & CSS Mastery",
        "description": "Build solid foundation in HTML structure and CSS styling",
        "duration": "2-3 weeks",
        "difficulty": "beginner",
        "type": "practice",
        "resources": [
            {"type": "course", "title": "Responsive Web Design", "url": "https://www.freecodecamp.org/learn/responsive-web-design/", "duration": "20 hours"},
            {"type": "practice", "title": "CSS Grid & Flexbox", "url": "https://flexboxfroggy.com/", "duration": "5 hours"},
            {"type": "practice", "title": "Grid Garden", "url": "https://cssgridgarden.com/", "duration": "3 hours"},
            {"type": "project", "title": "Personal Portfolio Website", "url": "#", "duration": "10 hours"},
        ],
        "skills": ["Semantic HTML", "CSS Grid", "Flexbox", "Responsive Design"],
        "prerequisites": ["Web Development Fundamentals"],
        "learning_resources": {
            "youtube_channels": [
                {"name": "Kevin Powell", "url": "https://www.youtube.com/@KevinPowell", "subscribers": "900K", "description": "CSS and JavaScript for front-end development"},
                _TRAVERSY_CHANNEL,
            ],
            "documentation": [
                {"name": "CSS-Tricks Flexbox Guide", "url": "https://css-tricks.com/snippets/css/a-guide-to-flexbox/", "description": "Visual reference for every flexbox property"},
                _MDN_DOCS,
            ],
            "books": [
                {"title": "CSS: The Definitive Guide", "author": "Eric Meyer", "free": False},
            ],
            "practice_websites": [
                {"name": "Frontend Mentor", "url": "https://www.frontendmentor.io/", "description": "Build real designs from style guides", "difficulty": "Beginner"},
                {"name": "Flexbox Froggy", "url": "https://flexboxfroggy.com/", "description": "Game for learning flexbox", "difficulty": "Beginner"},
            ],
            "communities": _WEB_COMMUNITIES,
        },
    },
    {
        "id": "3",
        "title": "JavaScript Fundamentals",
        "description": "Learn programming logic and JavaScript basics",
        "duration": "3-4 weeks",
        "difficulty": "beginner",
        "type": "practice",
        "resources": [
            {"type": "course", "title": "JavaScript Algorithms and Data Structures", "url": "https://www.freecodecamp.org/learn/javascript-algorithms-and-data-structures/", "duration": "30 hours"},
            {"type": "practice", "title": "JavaScript30 Challenge", "url": "https://javascript30.com/", "duration": "15 hours"},
            {"type": "video", "title": "JavaScript Crash Course", "url": "https://www.youtube.com/watch?v=hdI2bqOjy3c", "duration": "3 hours"},
            {"type": "article", "title": "The Modern JavaScript Tutorial", "url": "https://javascript.info/", "duration": "20 hours"},
        ],
        "skills": ["Variables", "Functions", "DOM Manipulation", "Event Handling", "ES6+"],
        "prerequisites": ["HTML & CSS Mastery"],
        "learning_resources": {
            "youtube_channels": [
                {"name": "JavaScript Mastery", "url": "https://www.youtube.com/@javascriptmastery", "subscribers": "1.5M", "description": "Modern JavaScript, React, and full-stack projects"},
                {"name": "Web Dev Simplified", "url": "https://www.youtube.com/@WebDevSimplified", "subscribers": "1.4M", "description": "React and modern web development"},
                _FREECODECAMP_CHANNEL,
            ],
            "documentation": [
                {"name": "MDN JavaScript Guide", "url": "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Guide", "description": "Language guide from basics to advanced"},
                {"name": "javascript.info", "url": "https://javascript.info/", "description": "In-depth modern JavaScript tutorial"},
            ],
            "books": [
                {"title": "Eloquent JavaScript", "author": "Marijn Haverbeke", "url": "https://eloquentjavascript.net/", "free": True},
                {"title": "You Don't Know JS Yet", "author": "Kyle Simpson", "url": "https://github.com/getify/You-Dont-Know-JS", "free": True},
            ],
            "practice_websites": [
                {"name": "Exercism JavaScript Track", "url": "https://exercism.org/tracks/javascript", "description": "Mentored exercises", "difficulty": "Beginner"},
                {"name": "Codewars", "url": "https://www.codewars.com/", "description": "Ranked kata challenges", "difficulty": "Beginner to Advanced"},
            ],
            "communities": _WEB_COMMUNITIES,
        },
    },
    {
        "id": "4",
        "title": "Interactive Web Projects",
        "description": "Build dynamic websites with JavaScript",
        "duration": "3-4 weeks",
        "difficulty": "intermediate",
        "type": "project",
        "resources": [
            {"type": "project", "title": "Todo List App", "url": "#", "duration": "8 hours"},
            {"type": "project", "title": "Weather App with API", "url": "#", "duration": "12 hours"},
            {"type": "project", "title": "Calculator App", "url": "#", "duration": "6 hours"},
            {"type": "article", "title": "Using the Fetch API", "url": "https://developer.mozilla.org/en-US/docs/Web/API/Fetch_API/Using_Fetch", "duration": "1 hour"},
        ],
        "skills": ["API Integration", "Local Storage", "Form Validation", "Project Structure"],
        "prerequisites": ["JavaScript Fundamentals"],
        "learning_resources": {
            "youtube_channels": [
                {"name": "Florin Pop", "url": "https://www.youtube.com/@FlorinPop", "subscribers": "200K", "description": "100 Days of Code challenges and JavaScript projects"},
                _TRAVERSY_CHANNEL,
            ],
            "documentation": [
                {"name": "Public APIs", "url": "https://github.com/public-apis/public-apis", "description": "Free APIs to build projects against"},
            ],
            "books": [],
            "practice_websites": [
                {"name": "Frontend Mentor", "url": "https://www.frontendmentor.io/", "description": "Project briefs with designs", "difficulty": "Intermediate"},
            ],
            "communities": _WEB_COMMUNITIES,
        },
    },
    {
        "id": FRAMEWORK_STEP_ID,
        "title": "Modern Frontend Framework",
        "description": "Choose and learn a modern framework (React/Vue/Angular)",
        "duration": "4-6 weeks",
        "difficulty": "intermediate",
        "type": "practice",
        "resources": [
            {"type": "course", "title": "React - The Complete Guide", "url": "https://reactjs.org/tutorial/tutorial.html", "duration": "40 hours"},
            {"type": "practice", "title": "React Hooks Practice", "url": "#", "duration": "10 hours"},
            {"type": "project", "title": "React Portfolio Project", "url": "#", "duration": "20 hours"},
            {"type": "article", "title": "Thinking in React", "url": "https://react.dev/learn/thinking-in-react", "duration": "1 hour"},
        ],
        "skills": ["React Components", "State Management", "Props", "Hooks", "JSX"],
        "prerequisites": ["Interactive Web Projects"],
        "learning_resources": {
            "youtube_channels": [
                {"name": "Academind", "url": "https://www.youtube.com/@academind", "subscribers": "1.1M", "description": "React, JavaScript, and web development"},
                {"name": "Web Dev Simplified", "url": "https://www.youtube.com/@WebDevSimplified", "subscribers": "1.4M", "description": "React and modern web development"},
            ],
            "documentation": [
                {"name": "React Docs", "url": "https://react.dev/learn", "description": "Official React documentation"},
                {"name": "Vue Guide", "url": "https://vuejs.org/guide/introduction.html", "description": "Official Vue documentation"},
            ],
            "books": [
                {"title": "The Road to React", "author": "Robin Wieruch", "free": False},
            ],
            "practice_websites": [
                {"name": "Scrimba", "url": "https://scrimba.com/", "description": "Interactive screencasts for React", "difficulty": "Intermediate"},
            ],
            "communities": [
                {"name": "Reactiflux", "url": "https://www.reactiflux.com/", "description": "Discord community for React developers"},
            ],
        },
    },
    {
        "id": "6",
        "title": "Backend Basics",
        "description": "Learn server-side development with Node.js",
        "duration": "4-5 weeks",
        "difficulty": "intermediate",
        "type": "practice",
        "resources": [
            {"type": "course", "title": "Node.js & Express.js Course", "url": "#", "duration": "25 hours"},
            {"type": "practice", "title": "REST API Development", "url": "#", "duration": "15 hours"},
            {"type": "project", "title": "Full-Stack CRUD App", "url": "#", "duration": "20 hours"},
            {"type": "article", "title": "Express Guide", "url": "https://expressjs.com/en/guide/routing.html", "duration": "2 hours"},
        ],
        "skills": ["Node.js", "Express.js", "REST APIs", "Database Integration", "Authentication"],
        "prerequisites": ["Modern Frontend Framework"],
        "learning_resources": {
            "youtube_channels": [
                {"name": "The Net Ninja", "url": "https://www.youtube.com/@NetNinja", "subscribers": "1.2M", "description": "Node.js and backend development"},
                _TRAVERSY_CHANNEL,
            ],
            "documentation": [
                {"name": "Node.js Docs", "url": "https://nodejs.org/en/docs", "description": "Official Node.js API reference"},
            ],
            "books": [
                {"title": "Node.js Design Patterns", "author": "Mario Casciaro", "free": False},
            ],
            "practice_websites": [
                {"name": "The Odin Project", "url": "https://www.theodinproject.com/paths/full-stack-javascript", "description": "Full-stack JavaScript path", "difficulty": "Intermediate"},
            ],
            "communities": [
                {"name": "r/node", "url": "https://www.reddit.com/r/node/", "description": "Node.js discussion"},
            ],
        },
    },
]


DATA_SCIENCE_STEPS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Python Programming Basics",
        "description": "Learn Python fundamentals for data science",
        "duration": "2-3 weeks",
        "difficulty": "beginner",
        "type": "practice",
        "resources": [
            {"type": "course", "title": "Python for Everybody", "url": "https://www.coursera.org/specializations/python", "duration": "20 hours"},
            {"type": "practice", "title": "Python Exercises", "url": "https://www.hackerrank.com/domains/python", "duration": "10 hours"},
        ],
        "skills": ["Python Syntax", "Data Types", "Control Structures", "Functions"],
        "prerequisites": [],
    },
    {
        "id": "2",
        "title": "Data Analysis Libraries",
        "description": "Master pandas, numpy, and matplotlib",
        "duration": "3-4 weeks",
        "difficulty": "intermediate",
        "type": "practice",
        "resources": [
            {"type": "course", "title": "Data Analysis with Python", "url": "https://www.freecodecamp.org/learn/data-analysis-with-python/", "duration": "30 hours"},
            {"type": "practice", "title": "Pandas Exercises", "url": "#", "duration": "15 hours"},
        ],
        "skills": ["Pandas", "NumPy", "Matplotlib", "Data Cleaning", "Data Visualization"],
        "prerequisites": ["Python Programming Basics"],
    },
    {
        "id": "3",
        "title": "Statistics & Mathematics",
        "description": "Essential statistics for data science",
        "duration": "3-4 weeks",
        "difficulty": "intermediate",
        "type": "theory",
        "resources": [
            {"type": "course", "title": "Statistics for Data Science", "url": "#", "duration": "25 hours"},
            {"type": "practice", "title": "Statistical Analysis Projects", "url": "#", "duration": "10 hours"},
        ],
        "skills": ["Descriptive Statistics", "Probability", "Hypothesis Testing", "Correlation"],
        "prerequisites": ["Data Analysis Libraries"],
    },
]


MOBILE_APPS_STEPS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Mobile Development Fundamentals",
        "description": "Understand mobile app development concepts",
        "duration": "1-2 weeks",
        "difficulty": "beginner",
        "type": "theory",
        "resources": [
            {"type": "video", "title": "Mobile App Development Overview", "url": "#", "duration": "3 hours"},
            {"type": "article", "title": "Native vs Cross-platform", "url": "#", "duration": "1 hour"},
        ],
        "skills": ["Mobile Concepts", "Platform Differences", "Development Options"],
        "prerequisites": [],
    },
    {
        "id": "2",
        "title": "React Native Basics",
        "description": "Learn cross-platform mobile development",
        "duration": "4-5 weeks",
        "difficulty": "intermediate",
        "type": "practice",
        "resources": [
            {"type": "course", "title": "React Native - The Practical Guide", "url": "#", "duration": "35 hours"},
            {"type": "project", "title": "First Mobile App", "url": "#", "duration": "15 hours"},
        ],
        "skills": ["React Native", "Mobile UI", "Navigation", "Device APIs"],
        "prerequisites": ["Mobile Development Fundamentals"],
    },
]


DEFAULT_STEPS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Programming Fundamentals",
        "description": "Learn basic programming concepts and logic",
        "duration": "2-3 weeks",
        "difficulty": "beginner",
        "type": "theory",
        "resources": [
            {"type": "video", "title": "Programming Basics Course", "url": "#", "duration": "10 hours"},
            {"type": "practice", "title": "Logic Building Exercises", "url": "#", "duration": "8 hours"},
        ],
        "skills": ["Variables", "Functions", "Loops", "Conditionals", "Problem Solving"],
        "prerequisites": [],
    },
    {
        "id": "2",
        "title": "Choose Your Language",
        "description": "Learn your first programming language thoroughly",
        "duration": "4-5 weeks",
        "difficulty": "beginner",
        "type": "practice",
        "resources": [
            {"type": "course", "title": "Python/JavaScript Fundamentals", "url": "#", "duration": "25 hours"},
            {"type": "practice", "title": "Coding Challenges", "url": "#", "duration": "15 hours"},
        ],
        "skills": ["Language Syntax", "Data Structures", "Object-Oriented Programming"],
        "prerequisites": ["Programming Fundamentals"],
    },
]


# Exact, case-sensitive match on the primary interest; anything else gets DEFAULT_STEPS
STEP_TEMPLATES: Dict[str, List[Dict[str, Any]]] = {
    "Web Development": WEB_DEVELOPMENT_STEPS,
    "Data Science": DATA_SCIENCE_STEPS,
    "Mobile Apps": MOBILE_APPS_STEPS,
}


# (week, title, description, start, stop) windows over the step list
MILESTONE_TEMPLATES = [
    (4, "Foundation Complete", "You've mastered the basics and ready for intermediate concepts", 0, 2),
    (8, "Practical Skills", "You can build basic projects and solve real problems", 2, 4),
    (12, "Advanced Concepts", "You're ready for complex projects and advanced topics", 4, None),
]


SUPPORTED_INTERESTS: List[str] = [
    "Web Development",
    "Mobile Apps",
    "Data Science",
    "AI/Machine Learning",
    "Game Development",
    "Desktop Applications",
    "DevOps",
    "Cybersecurity",
]

REQUIRED_PROFILE_FIELDS: List[str] = [
    "name",
    "experience",
    "interests",
    "goals",
    "timeCommitment",
    "preferredLearning",
]
