from setuptools import setup
from pathlib import Path

requirements = Path('requirements.txt').read_text().split('\n')
requirements = [line for line in requirements if line.strip()]
readme = Path('README.md').read_text()


setup(name="chunkpos",
      version="0.1.0",
      description="Index chunk position tracking for block-compressed alignment files.",
      long_description=readme,
      long_description_content_type="text/markdown",
      license="AGPL-3.0",
      packages=['chunkpos'],
      zip_safe=True,
      install_requires=requirements,
      extras_require={'test': ['pytest']},
      keywords="bam bgzf index chunk virtual offset genomics".split(' '),
      python_requires='>=3.10',
)
