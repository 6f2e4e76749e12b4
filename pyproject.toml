[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bgce"
version = "0.1.0"
description = "Small command-line tools and WSGI services: word count, to-do list, unit converter, brace check, GitHub activity and a URL shortener"
requires-python = ">=3.10"
keywords = ["wc", "todo", "unit-converter", "url-shortener", "github", "wsgi", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Utilities",
]
dependencies = [
    "rich",
    "pymysql",
    "python-dotenv",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bgce-wc = "bgce.wordcount:main"
bgce-todo = "bgce.todo:main"
bgce-jsoncheck = "bgce.jsoncheck:main"
bgce-units = "bgce.units:main"
bgce-activity = "bgce.activity:main"
bgce-shortener = "bgce.shortener:main"
bgce-categories = "bgce.services:main_categories"
bgce-classnotes = "bgce.services:main_classnotes"
bgce-test-server = "bgce.services:main_test_server"

[tool.hatch.build.targets.wheel]
packages = ["bgce"]

[tool.pytest.ini_options]
addopts = "-ra"
