import os

from setuptools import find_packages, setup


# Read requirements from requirements.txt
def read_requirements():
    requirements_path = os.path.join(
        os.path.dirname(__file__), "requirements.txt"
    )
    if os.path.exists(requirements_path):
        with open(requirements_path, "r", encoding="utf-8") as f:
            requirements = []
            for line in f:
                line = line.strip()
                # Skip empty lines and comments
                if line and not line.startswith("#"):
                    requirements.append(line)
            return requirements
    return []


setup(
    name="logstruct",
    version="0.1",
    description="Heuristic log structure analyzer",
    packages=find_packages("src", exclude=["tests*"]),
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: Apache Software License",
    ],
    python_requires=">=3.9",
    include_package_data=True,
    package_dir={"": "src"},
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "logstruct=logstruct.entrypoints.analyze:main",
        ]
    },
    zip_safe=False,
)
