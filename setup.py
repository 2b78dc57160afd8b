from setuptools import setup, find_packages


def load_requirements(filename='requirements.txt'):
    with open(filename, 'r') as file:
        return [line for line in file.read().splitlines() if line and not line.startswith('#')]

setup(
    name='wecc',
    version='0.1.0',
    description='Generic short weierstrass elliptic curve arithmetic over prime fields and the reals.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(include=['wecc', 'wecc.*']),
    install_requires=[],
    extras_require={
        'test': load_requirements(),
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Security :: Cryptography',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.7',
)
