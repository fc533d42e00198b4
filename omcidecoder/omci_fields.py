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
from binascii import hexlify
from collections import namedtuple

import structlog
from bitstring import BitArray
from scapy.fields import ByteField, SignedShortField

from omcidecoder.omci_defs import OmciTruncatedBufferError


log = structlog.get_logger()


def hexstr(octets):
    return None if octets is None else hexlify(octets).decode('ascii')


def getfield_at(fld, s, offset, length=None):
    """
    Extract the internal value of a scapy field located at offset in s.
    The field only ever sees the octets that lie inside s.

    :param fld: (Field) scapy field
    :param s: (bytes) buffer
    :param offset: (int) octet offset of the field in s
    :param length: (int) field width, defaults to the scapy field size
    :return: decoded value
    :raises OmciTruncatedBufferError: s is too short to hold the field
    """
    if length is None:
        length = fld.sz
    if offset + length > len(s):
        raise OmciTruncatedBufferError(offset, length,
                                       max(len(s) - offset, 0))
    _, value = fld.getfield(None, s[offset:offset + length])
    return value


class OmciTruncation(object):
    """Where a decode path ran into the end of the buffer"""

    def __init__(self, consumed, expected):
        self.consumed = consumed
        self.expected = expected

    @classmethod
    def from_error(cls, s, e):
        return cls(min(e.offset, len(s)), e.offset + e.needed)

    def to_dict(self):
        return dict(consumed=self.consumed, expected=self.expected)

    def __repr__(self):
        return 'OmciTruncation(consumed={}, expected={})'.format(
            self.consumed, self.expected)


class OmciAttributeValue(object):
    """
    One attribute of an attribute list. Requests that only name
    attributes (Get) leave offset, raw and value as None.
    """

    def __init__(self, index, attribute, offset=None, raw=None, value=None):
        self.index = index
        self.attribute = attribute
        self.offset = offset
        self.raw = raw
        self.value = value

    @property
    def name(self):
        return self.attribute.name

    @property
    def length(self):
        return self.attribute.length

    def to_dict(self):
        value = self.value
        if isinstance(value, bytes):
            value = hexstr(value)
        return dict(index=self.index, name=self.name, offset=self.offset,
                    length=self.length, raw=hexstr(self.raw), value=value)

    def __repr__(self):
        return 'OmciAttributeValue({:02d}: {}={!r})'.format(
            self.index, self.name, self.value)


def _attribute_values(selected, s):
    values = []
    for index, attribute, offset in selected:
        try:
            value = getfield_at(attribute.field, s, offset, attribute.length)
        except OmciTruncatedBufferError as e:
            last = selected[-1]
            log.warning('attribute-list-truncated', attribute=attribute.name,
                        index=index, offset=offset, needed=e.needed,
                        available=e.available)
            return values, OmciTruncation(
                min(offset, len(s)), last.offset + last.attribute.length)
        values.append(OmciAttributeValue(
            index, attribute, offset, s[offset:offset + attribute.length],
            value))
    return values, None


class OmciMaskedData(object):
    """
    Attribute values selected by an attribute mask, back to back in
    ascending attribute order starting at a fixed content offset
    """

    def __init__(self, name, offset):
        self.name = name
        self.offset = offset

    def getfield(self, entity_class, attributes_mask, s):
        """
        :return: (list, list, OmciTruncation) attribute values, mask
                 indices not defined by the class, truncation or None
        """
        selected, undefined = entity_class.select_attributes(
            attributes_mask, self.offset)
        if undefined:
            log.debug('undefined-attributes-selected',
                      class_id=entity_class.class_id, indices=undefined)
        values, truncation = _attribute_values(selected, s)
        return values, undefined, truncation

    def names(self, entity_class, attributes_mask):
        """Selected attributes without values, as named by a Get request"""
        selected, undefined = entity_class.select_attributes(attributes_mask)
        return [OmciAttributeValue(index, attribute)
                for index, attribute, _ in selected], undefined


class OmciCreateData(object):
    """The set-by-create attributes of a class, in class order"""

    def __init__(self, name, offset=0):
        self.name = name
        self.offset = offset

    def getfield(self, entity_class, s):
        return _attribute_values(entity_class.create_attributes(self.offset), s)


AlarmBitmapSize = 28
AlarmPaddingSize = 3


class OmciAlarmBitmap(object):
    """
    Alarm bit map of an Alarm message: 224 alarm numbers over 28 octets.
    Alarm n is bit (n % 8) of octet (n // 8), bit 0 being the least
    significant bit.
    """

    def __init__(self, name, offset=0):
        self.name = name
        self.offset = offset

    def getfield(self, s):
        """
        :return: (list, OmciTruncation) ascending raised alarm numbers for
                 the octets present, truncation or None
        """
        bitmap = s[self.offset:self.offset + AlarmBitmapSize]
        bits = BitArray(bytes=bitmap)
        alarms = []
        for octet in range(len(bitmap)):
            for bit in range(8):
                if bits[octet * 8 + 7 - bit]:
                    alarms.append(octet * 8 + bit)

        truncation = None
        if len(bitmap) < AlarmBitmapSize:
            truncation = OmciTruncation(len(bitmap) + self.offset,
                                        AlarmBitmapSize + self.offset)
        return alarms, truncation


def alarm_table_number(alarm):
    """
    Number of a decoded alarm in the ME class alarm tables, which count
    from the most significant bit of each octet
    """
    return (alarm // 8) * 8 + 7 - alarm % 8


TestResultItem = namedtuple('TestResultItem',
                            'offset tag name unit convert zero_unsupported')

# ANI-G test result report, one (tag, value) record per item
AniGTestResultItems = [
    TestResultItem(0, 1, 'power_feed_voltage', 'mV',
                   lambda raw: raw * 20, False),
    TestResultItem(3, 3, 'received_optical_power', 'dBm',
                   lambda raw: raw * 0.002 - 30, True),
    TestResultItem(6, 5, 'transmitted_optical_power', 'dBm',
                   lambda raw: raw * 0.002 - 30, True),
    TestResultItem(9, 9, 'laser_bias_current', 'uA',
                   lambda raw: raw * 2, False),
    TestResultItem(12, 12, 'temperature', 'degC',
                   lambda raw: raw / 256.0, False),
]


class OmciTestResultRecord(object):

    def __init__(self, item, found_tag=None, raw=None):
        self.item = item
        self.found_tag = found_tag
        self.raw = raw

    @property
    def name(self):
        return self.item.name

    @property
    def offset(self):
        return self.item.offset

    @property
    def unit(self):
        return self.item.unit

    @property
    def truncated(self):
        return self.found_tag is None or self.raw is None

    @property
    def malformed(self):
        return not self.truncated and self.found_tag != self.item.tag

    @property
    def supported(self):
        return not (self.item.zero_unsupported and self.raw == 0)

    @property
    def value(self):
        """Value in physical units, None when not available"""
        if self.truncated or self.malformed or not self.supported:
            return None
        return self.item.convert(self.raw)

    def to_dict(self):
        return dict(name=self.name, offset=self.offset,
                    expected_tag=self.item.tag, found_tag=self.found_tag,
                    raw=self.raw, value=self.value, unit=self.unit,
                    supported=self.supported, malformed=self.malformed)

    def __repr__(self):
        if self.malformed:
            return 'OmciTestResultRecord({}: unexpected tag 0x{:02x})'.format(
                self.name, self.found_tag)
        return 'OmciTestResultRecord({}={!r} {})'.format(
            self.name, self.value, self.unit)


class OmciTestResultRecords(object):
    """
    Fixed position (tag, value) diagnostic records. Each record is checked
    on its own, a bad tag or a missing record does not affect the others.
    """

    _tag_fld = ByteField("tag", None)
    _value_fld = SignedShortField("value", None)

    def __init__(self, name, items):
        self.name = name
        self.items = items

    def getfield(self, s):
        """
        :return: (list, OmciTruncation) one record per item, truncation
                 or None
        """
        records = []
        truncation = None
        for item in self.items:
            record = OmciTestResultRecord(item)
            try:
                record.found_tag = getfield_at(self._tag_fld, s, item.offset)
                record.raw = getfield_at(self._value_fld, s, item.offset + 1)
            except OmciTruncatedBufferError as e:
                if truncation is None:
                    truncation = OmciTruncation.from_error(s, e)
                truncation.expected = item.offset + 3
            if record.malformed:
                log.warning('unexpected-test-result-tag', item=item.name,
                            offset=item.offset, expected=item.tag,
                            found=record.found_tag)
            records.append(record)
        return records, truncation
