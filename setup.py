from setuptools import setup

setup(
    name="group-schedule-bot",  # The name you use to `pip install`
    version="0.1.0",
    packages=['shared_lib', 'shared_lib.services', 'shared_lib.locales', 'bot', 'bot.handlers'], # Explicitly list packages
    description="Telegram bot that renders a study group's schedule for today or tomorrow.",
    install_requires=[
        "aiogram>=3.4",
        "aiohttp>=3.9",
        "certifi>=2024.2.2",
        "pydantic>=2.6",
        "python-dotenv>=1.0",
        "tzdata",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    # This tells setuptools that the package data (like .json files) should be included
    package_data={
        'shared_lib.locales': ['*.json'],
    },
    include_package_data=True,
    python_requires='>=3.11',
)
