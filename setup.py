
from setuptools import setup
import requestdsl

setup(
    name='requestdsl',
    version=requestdsl.__version__,
    packages=['requestdsl', ],
    license='MIT',
    long_description=open('README.rst').read(),
    author='izrik',
    author_email='izrik@izrik.com',
    description='Declarative builder for immutable HTTP request values.',
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
