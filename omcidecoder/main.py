#!/usr/bin/env python
#
# Copyright 2017 the original author or authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""omcidump: decode OMCI frames from hex strings or pcap captures"""

import argparse
import binascii
import os
import sys

import arrow
import yaml
from scapy.layers.l2 import Ether
from scapy.utils import PcapReader
from simplejson import dumps

from common.structlog_setup import setup_logging
from omcidecoder.omci_defs import OmciEthertype
from omcidecoder.omci_fields import hexstr
from omcidecoder.omci_frame import decode_frame


defs = dict(
    config=os.environ.get('CONFIG', './omcidecoder.yml'),
    logconfig=os.environ.get('LOGCONFIG', './logconfig.yml'),
    ethertype=os.environ.get('OMCI_ETHERTYPE', None),
    output_format=os.environ.get('OUTPUT_FORMAT', None),
    instance_id=os.environ.get('INSTANCE_ID', 'omcidump'),
)

output_formats = ('summary', 'json')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Decode OMCI frames given as hex strings, as a file of '
                    'hex strings or as a pcap capture')

    _help = ('Path to omcidecoder.yml config file (default: %s). '
             'If relative, it is relative to main.py of omcidecoder.'
             % defs['config'])
    parser.add_argument('-c', '--config',
                        dest='config',
                        action='store',
                        default=defs['config'],
                        help=_help)

    _help = ('Path to logconfig.yml config file (default: %s). '
             'If relative, it is relative to main.py of omcidecoder.'
             % defs['logconfig'])
    parser.add_argument('-l', '--logconfig',
                        dest='logconfig',
                        action='store',
                        default=defs['logconfig'],
                        help=_help)

    _help = 'file with one hex encoded frame per line'
    parser.add_argument('-f', '--file',
                        dest='hex_file',
                        action='store',
                        default=None,
                        help=_help)

    _help = 'pcap capture to read Ethernet frames from'
    parser.add_argument('-r', '--read',
                        dest='pcap_file',
                        action='store',
                        default=None,
                        help=_help)

    _help = ('ethertype of OMCI frames in a pcap capture '
             '(default: from config file, else 0x%04x)' % OmciEthertype)
    parser.add_argument('-t', '--ethertype',
                        dest='ethertype',
                        action='store',
                        type=lambda v: int(v, 0),
                        default=defs['ethertype'],
                        help=_help)

    _help = ('output format, one of %s (default: from config file)'
             % ', '.join(output_formats))
    parser.add_argument('-o', '--output-format',
                        dest='output_format',
                        action='store',
                        choices=output_formats,
                        default=defs['output_format'],
                        help=_help)

    _help = ('instance id to tag log lines with (default: %s)'
             % defs['instance_id'])
    parser.add_argument('-i', '--instance-id',
                        dest='instance_id',
                        action='store',
                        default=defs['instance_id'],
                        help=_help)

    _help = 'suppress informational log lines'
    parser.add_argument('-q', '--quiet',
                        dest='quiet',
                        action='count',
                        help=_help)

    _help = 'enable verbose logging'
    parser.add_argument('-v', '--verbose',
                        dest='verbose',
                        action='count',
                        help=_help)

    parser.add_argument('frames',
                        nargs='*',
                        metavar='HEX',
                        help='hex encoded frame, spaces allowed')

    return parser.parse_args(argv)


def load_config(args, configname='config'):
    argdict = vars(args)
    path = argdict[configname]
    if path.startswith('.'):
        dir = os.path.dirname(os.path.abspath(__file__))
        path = os.path.join(dir, path)
    path = os.path.abspath(path)
    with open(path) as fd:
        config = yaml.safe_load(fd)
    return config


def parse_hex(text):
    """
    :param text: (str) hex digits, optionally separated by whitespace
    :return: (bytes) frame
    :raises ValueError: text is not an even number of hex digits
    """
    try:
        return binascii.unhexlify(''.join(text.split()))
    except (binascii.Error, TypeError) as e:
        raise ValueError('invalid hex frame: {}'.format(e))


def hex_lines(fd):
    """Non blank lines of a hex frame file, '#' starts a comment"""
    for line in fd:
        line = line.split('#', 1)[0].strip()
        if line:
            yield line


def pcap_frames(path, ethertype):
    """
    :return: iterator of (timestamp, bytes) for the payload of every
             Ethernet frame of the given ethertype
    """
    for pkt in PcapReader(path):
        if Ether in pkt and pkt[Ether].type == ethertype:
            yield float(pkt.time), bytes(pkt[Ether].payload)


class Main(object):

    def __init__(self, argv=None):

        self.args = args = parse_args(argv)
        self.config = load_config(args) or {}
        self.logconfig = load_config(args, 'logconfig')

        verbosity_adjust = (args.verbose or 0) - (args.quiet or 0)
        self.log = setup_logging(self.logconfig,
                                 args.instance_id,
                                 verbosity_adjust=verbosity_adjust,
                                 cache_on_use=True)

        output = self.config.get('output', {})
        capture = self.config.get('capture', {})
        self.output_format = args.output_format or \
            output.get('format', 'summary')
        self.show_frame = output.get('show_frame', False)
        self.ethertype = args.ethertype or \
            capture.get('ethertype', OmciEthertype)
        self.errors = 0

    def frames(self):
        """
        :return: iterator of (timestamp, bytes) over every input frame,
                 timestamp is None unless read from a capture
        """
        args = self.args
        lines = list(args.frames)
        if args.hex_file is not None:
            with open(args.hex_file) as fd:
                lines.extend(hex_lines(fd))

        for line in lines:
            try:
                yield None, parse_hex(line)
            except ValueError as e:
                self.errors += 1
                self.log.error('invalid-hex-frame', line=line, e=str(e))

        if args.pcap_file is not None:
            self.log.debug('reading-capture', path=args.pcap_file,
                           ethertype='0x{:04x}'.format(self.ethertype))
            for timestamp, frame in pcap_frames(args.pcap_file,
                                                self.ethertype):
                yield timestamp, frame

    def render(self, timestamp, frame, result):
        if self.output_format == 'json':
            d = result.to_dict()
            if timestamp is not None:
                d['timestamp'] = arrow.get(timestamp).isoformat()
            if self.show_frame:
                d['frame'] = hexstr(frame)
            return dumps(d, sort_keys=True)

        line = result.summary()
        if timestamp is not None:
            line = '{} {}'.format(
                arrow.get(timestamp).format('HH:mm:ss.SSSSSS'), line)
        return line

    def start(self, out=None):
        out = out or sys.stdout
        count = 0
        for timestamp, frame in self.frames():
            result = decode_frame(frame)
            out.write(self.render(timestamp, frame, result) + '\n')
            count += 1
        self.log.info('frames-decoded', count=count, errors=self.errors)
        return 1 if self.errors else 0


def main(argv=None):
    return Main(argv).start()


if __name__ == '__main__':
    sys.exit(main())
