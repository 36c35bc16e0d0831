import re
import os.path
from setuptools import setup


ROOT = os.path.dirname(__file__)
with open(os.path.join(ROOT, 'tinyvalues', 'version.py')) as fd:
    VERSION = re.search("VERSION = '([^']+)'", fd.read()).group(1)

with open(os.path.join(ROOT, 'README.rst'), 'rb') as fd:
    README = fd.read().decode('utf8')


setup(
    name='tinyvalues',
    version=VERSION,
    license='BSD',
    author='Simon Sapin',
    author_email='simon.sapin@exyr.org',
    description='Parsers for CSS-like color, length, angle '
                'and box-edge values.',
    long_description=README,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
    ],
    packages=['tinyvalues', 'tinyvalues.tests'],
    python_requires='>=3.7',
    extras_require={'test': ['pytest']},
)
