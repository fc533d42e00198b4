#!/usr/bin/env python
# Copyright 2017-present Open Networking Foundation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from setuptools import setup

# Utility function to read the README file.
def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()

setup(
    name = 'omci-decoder',
    version = '1.0.0-dev',
    author = 'Open Networking Foundation, et al',
    author_email = 'info@opennetworking.org',
    description = ('ONT Management and Control Interface (OMCI) frame decoder'),
    license = 'Apache License 2.0',
    keywords = 'omci gpon ont onu',
    packages=['omcidecoder', 'common'],
    package_data={'omcidecoder': ['omcidecoder.yml', 'logconfig.yml']},
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    python_requires='>=3.6',
    install_requires=[
        'scapy>=2.4',
        'structlog>=18.1',
        'PyYAML>=5.1',
        'bitstring>=3.1,<5',
        'arrow>=0.15',
        'simplejson>=3.12',
    ],
    extras_require={
        'test': ['pytest>=4.6'],
    },
    entry_points={
        'console_scripts': [
            'omcidump=omcidecoder.main:main',
        ],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Topic :: System :: Networking',
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: Apache Software License',
    ],
)
