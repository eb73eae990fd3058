from setuptools import find_packages, setup

with open('requirements.txt', 'r') as file:
    requirements = [
        line.strip() for line in file.readlines()
        if line.strip() and not line.startswith('#')
    ]

extra_require = {
    'test': [
        'pytest',
    ]
}

packages = find_packages(include=['ponyurl', 'ponyurl.*'])

setup(
    name='ponyurl',
    version='0.1.0',
    packages=packages,
    python_requires='>=3.8.0',
    install_requires=requirements,
    extras_require=extra_require,
)
