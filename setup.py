from pathlib import Path
from setuptools import setup, find_packages

root = Path(__file__).parent
LONG_DESCRIPTION = root.joinpath('README.md').read_text(encoding='utf8')


setup(
    name='hexcolor',
    version='1.0.0',
    description="Convert hex color codes and legacy color descriptors to RGBA",
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    packages=find_packages(include=['hexcolor', 'hexcolor.*']),
    install_requires=root.joinpath('requirements.txt').read_text().splitlines(),
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Topic :: Multimedia :: Graphics',
    ],
    test_suite='tests'
)
