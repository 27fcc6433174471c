"""
Data Module - Static portfolio content
Every section of the home page reads its records from here.
"""

import copy


PROFILE = {
    'name': 'Alex Chen',
    'initials': 'AC',
    'role': 'Senior Frontend & AI Engineer',
    'tagline': (
        'Crafting exceptional digital experiences with cutting-edge technology. '
        'Specializing in React, Next.js, and AI-powered applications that make a difference.'
    ),
    'about_intro': (
        'Passionate about creating exceptional digital experiences that '
        'combine cutting-edge technology with human-centered design'
    ),
    'about': [
        "I'm a senior frontend engineer with a passion for building beautiful, "
        "performant web applications. I specialize in React ecosystems and have a "
        "deep interest in integrating AI capabilities into user-facing products.",
        "When I'm not coding, you'll find me exploring new technologies, "
        "contributing to open source, or mentoring developers who are just "
        "getting started.",
    ],
    'contact': {
        'email': 'alex.chen@example.com',
        'phone': '+1 (555) 123-4567',
        'location': 'San Francisco, CA',
    },
}

SOCIAL_LINKS = [
    {'label': 'GitHub', 'icon': 'github', 'href': 'https://github.com'},
    {'label': 'LinkedIn', 'icon': 'linkedin', 'href': 'https://linkedin.com'},
    {'label': 'Twitter', 'icon': 'twitter', 'href': 'https://twitter.com'},
    {'label': 'Email', 'icon': 'mail', 'href': 'mailto:alex.chen@example.com'},
]

NAV_ITEMS = [
    {'id': 'home', 'label': 'Home'},
    {'id': 'about', 'label': 'About'},
    {'id': 'projects', 'label': 'Projects'},
    {'id': 'skills', 'label': 'Skills'},
    {'id': 'testimonials', 'label': 'Testimonials'},
    {'id': 'contact', 'label': 'Contact'},
]

TIMELINE = [
    {
        'icon': 'briefcase',
        'title': 'Senior Frontend Engineer',
        'company': 'TechCorp Inc.',
        'period': '2021 - Present',
        'description': 'Leading frontend architecture and AI integration initiatives',
        'color': 'blue',
    },
    {
        'icon': 'code',
        'title': 'Frontend Developer',
        'company': 'StartupXYZ',
        'period': '2019 - 2021',
        'description': 'Built scalable React applications from ground up',
        'color': 'green',
    },
    {
        'icon': 'graduation-cap',
        'title': 'Computer Science, M.S.',
        'company': 'Stanford University',
        'period': '2017 - 2019',
        'description': 'Focus on AI and Human-Computer Interaction',
        'color': 'purple',
    },
]

HIGHLIGHTS = [
    'React Expert',
    'AI Integration',
    'Team Leadership',
    'System Architecture',
]

PROJECTS = [
    {
        'id': 'ai-dashboard',
        'title': 'AI Analytics Dashboard',
        'description': 'Real-time analytics platform with AI-powered insights and predictive modeling capabilities.',
        'full_description': (
            'A comprehensive analytics platform that leverages machine learning to provide '
            'real-time insights and predictive modeling capabilities for business intelligence. '
            'Built with modern React architecture and integrated with TensorFlow.js for '
            'client-side ML processing.'
        ),
        'image': 'https://images.unsplash.com/photo-1551288049-bebda4e38f71?auto=format&fit=crop&w=800&h=600',
        'category': 'AI/ML',
        'technologies': ['React', 'Next.js', 'TypeScript', 'TensorFlow.js', 'D3.js', 'Node.js', 'PostgreSQL'],
        'features': [
            'Real-time data visualization with interactive charts',
            'Machine learning-powered predictive analytics',
            'Custom AI model integration for business insights',
            'Responsive design with mobile-first approach',
            'Advanced filtering and data export capabilities',
        ],
        'challenges': (
            'The main challenge was integrating complex ML models with real-time data visualization '
            'while maintaining excellent performance and user experience. We solved this by '
            'implementing efficient data streaming and client-side model optimization.'
        ),
        'outcome': (
            'Increased user engagement by 150% and reduced data analysis time by 70% for business '
            'analysts. The platform now serves over 50,000 daily active users with 99.9% uptime.'
        ),
        'github': 'https://github.com',
        'demo': '',
    },
    {
        'id': 'ecommerce-platform',
        'title': 'E-commerce Platform',
        'description': 'Full-stack e-commerce solution with advanced product filtering and AI-powered recommendations.',
        'full_description': (
            'A modern, full-stack e-commerce solution featuring advanced product filtering, '
            'AI-powered recommendations, and seamless payment integration. Built with Next.js '
            'and integrated with Stripe for secure payments.'
        ),
        'image': 'https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?auto=format&fit=crop&w=800&h=600',
        'category': 'E-commerce',
        'technologies': ['Next.js', 'TypeScript', 'Stripe', 'Prisma', 'PostgreSQL', 'Redis', 'AWS'],
        'features': [
            'AI-powered product recommendations',
            'Advanced search and filtering system',
            'Secure payment processing with Stripe',
            'Inventory management dashboard',
            'Multi-vendor marketplace support',
        ],
        'challenges': (
            'Building a scalable architecture that could handle high traffic loads while '
            'maintaining fast page load times and ensuring secure payment processing. We '
            'implemented efficient caching strategies and optimized database queries.'
        ),
        'outcome': (
            'Achieved 99.9% uptime with average page load times under 2 seconds, resulting in 40% '
            'increase in conversion rates and processing over $2M in transactions monthly.'
        ),
        'github': 'https://github.com',
        'demo': '',
    },
    {
        'id': 'collaboration-platform',
        'title': 'Team Collaboration Platform',
        'description': 'Real-time collaboration platform with video calling, file sharing, and project management features.',
        'full_description': (
            'A comprehensive real-time collaboration platform featuring HD video calling, file '
            'sharing, project management, and team communication tools. Built with React and '
            'WebRTC for seamless real-time interactions.'
        ),
        'image': 'https://images.unsplash.com/photo-1522202176988-66273c2fd55f?auto=format&fit=crop&w=800&h=600',
        'category': 'SaaS',
        'technologies': ['React', 'WebRTC', 'Socket.io', 'Node.js', 'MongoDB', 'AWS S3', 'Docker'],
        'features': [
            'HD video calling with screen sharing',
            'Real-time collaborative document editing',
            'Project management with Kanban boards',
            'File sharing with version control',
            'Team chat with emoji reactions',
        ],
        'challenges': (
            'Implementing real-time synchronization across multiple users while ensuring data '
            'consistency and handling network interruptions gracefully. We built a robust conflict '
            'resolution system and implemented automatic reconnection.'
        ),
        'outcome': (
            'Successfully deployed to 10,000+ users across 500+ organizations with 99.5% uptime and '
            'average latency under 100ms for real-time features. Increased team productivity by 35% '
            'based on user surveys.'
        ),
        'github': 'https://github.com',
        'demo': '',
    },
]

SKILL_CATEGORIES = [
    {
        'icon': 'code',
        'title': 'Frontend Development',
        'description': 'Building modern, responsive, and interactive user interfaces using React, Next.js, and Tailwind CSS.',
        'skills': [],
        'color': 'blue',
    },
    {
        'icon': 'brain',
        'title': 'AI',
        'description': 'Enhancing applications with AI-powered features using OpenAI and TensorFlow',
        'skills': [],
        'color': 'green',
    },
    {
        'icon': 'server',
        'title': 'Backend Development',
        'description': 'Creating scalable backend systems with Node.js, cloud services, and API integrations.',
        'skills': [],
        'color': 'purple',
    },
]

TECHNOLOGIES = [
    {'name': 'React', 'color': 'blue'},
    {'name': 'Next.js', 'color': 'gray'},
    {'name': 'JavaScript', 'color': 'blue'},
    {'name': 'Tailwind CSS', 'color': 'cyan'},
    {'name': 'Bootstrap', 'color': 'purple'},
    {'name': 'Node.js', 'color': 'green'},
    {'name': 'PowerBI', 'color': 'orange'},
    {'name': 'Python', 'color': 'red'},
    {'name': 'MySQL', 'color': 'yellow'},
    {'name': 'C', 'color': 'indigo'},
    {'name': 'API', 'color': 'pink'},
    {'name': 'Integration', 'color': 'gray'},
    {'name': 'Cloud', 'color': 'orange'},
    {'name': 'MongoDB', 'color': 'green'},
]

TESTIMONIALS = [
    {
        'id': 1,
        'name': 'Sarah Mitchell',
        'role': 'VP of Engineering, TechCorp',
        'initials': 'SM',
        'gradient': '#3b82f6, #8b5cf6',
        'content': (
            'Alex is an exceptional frontend engineer who combines technical excellence with '
            'creative problem-solving. His work on our AI-powered dashboard exceeded all '
            'expectations and delivered significant business value. His ability to translate '
            'complex requirements into elegant user experiences is remarkable.'
        ),
    },
    {
        'id': 2,
        'name': 'David Johnson',
        'role': 'CTO, StartupXYZ',
        'initials': 'DJ',
        'gradient': '#10b981, #06b6d4',
        'content': (
            'Working with Alex was a game-changer for our startup. He architected our entire '
            'frontend from scratch and built a scalable foundation that grew with us from 1,000 '
            'to 100,000+ users. His expertise in performance optimization and modern React '
            'patterns is top-notch.'
        ),
    },
    {
        'id': 3,
        'name': 'Emily Rodriguez',
        'role': 'Senior Developer, InnovateTech',
        'initials': 'ER',
        'gradient': '#8b5cf6, #ec4899',
        'content': (
            "Alex's mentorship and technical leadership transformed our frontend team. His code "
            "reviews were educational, his architecture decisions were sound, and his ability to "
            "solve complex problems with elegant solutions inspired everyone around him. A true "
            "senior engineer."
        ),
    },
]


def load_data():
    """
    Load all portfolio content for the home page

    Returns:
        dict: A deep copy of every content record, keyed by section
    """
    return copy.deepcopy({
        'profile': PROFILE,
        'social': SOCIAL_LINKS,
        'nav_items': NAV_ITEMS,
        'timeline': TIMELINE,
        'highlights': HIGHLIGHTS,
        'projects': PROJECTS,
        'skill_categories': SKILL_CATEGORIES,
        'technologies': TECHNOLOGIES,
        'testimonials': TESTIMONIALS,
    })


def get_project(project_id):
    """Find a project by its slug id, or None"""
    project = next((p for p in PROJECTS if p['id'] == str(project_id)), None)
    return copy.deepcopy(project) if project else None


def get_global_meta():
    """Default meta tags for SEO"""
    return {
        'title': f"{PROFILE['name']} | {PROFILE['role']}",
        'description': PROFILE['tagline'],
        'keywords': ', '.join([PROFILE['name'], 'Portfolio'] + [t['name'] for t in TECHNOLOGIES[:6]]),
    }


__all__ = [
    'PROFILE',
    'SOCIAL_LINKS',
    'NAV_ITEMS',
    'TIMELINE',
    'HIGHLIGHTS',
    'PROJECTS',
    'SKILL_CATEGORIES',
    'TECHNOLOGIES',
    'TESTIMONIALS',
    'load_data',
    'get_project',
    'get_global_meta'
]
