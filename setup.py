#!/usr/bin/env python
#

import setuptools

from mailchars import __version__


def read_requirements(name):
    requirements = []
    try:
        with open(name) as req_file:
            for line in req_file:
                if '#' in line:
                    line = line[:line.index('#')]
                line = line.strip()
                if line.startswith('-r'):
                    requirements.extend(read_requirements(line[2:].strip()))
                elif line and not line.startswith('-'):
                    requirements.append(line)
    except IOError:
        pass
    return requirements


setuptools.setup(
    name='mailchars',
    version=__version__,
    description='Character classification for mail related grammars',
    long_description='\n'+open('README.rst').read(),
    packages=['mailchars'],
    zip_safe=True,
    platforms='any',
    install_requires=read_requirements('requirements.txt'),
    extras_require={
        'test': read_requirements('test-requirements.txt'),
        'docs': read_requirements('docs-requirements.txt'),
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Communications :: Email',
        'Development Status :: 3 - Alpha',
    ],
)
