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
import inspect
import sys

import structlog
from scapy.fields import ByteField, ShortField

from omcidecoder.omci_defs import MessageType, DeviceIdentifier, \
    DecodeCondition, OmciTruncatedBufferError, result_code_name, \
    test_id_name
from omcidecoder.omci_entities import AniG, entity_class_for
from omcidecoder.omci_fields import OmciMaskedData, OmciCreateData, \
    OmciAlarmBitmap, OmciTestResultRecords, OmciTruncation, \
    AniGTestResultItems, AlarmBitmapSize, AlarmPaddingSize, getfield_at, \
    alarm_table_number, hexstr


log = structlog.get_logger()

MT = MessageType
DC = DecodeCondition

AR = 0x40   # acknowledge request
AK = 0x20   # acknowledgement


def message_id(message_type, ack_request, ack):
    """Dispatch key: the message type octet without the destination bit"""
    return (AR if ack_request else 0) | (AK if ack else 0) | message_type


class OmciMessageContent(object):
    """
    Decoded 32 octet message contents. Each derived class handles the
    message_ids it lists.
    """
    name = "OmciMessageContent"
    message_ids = ()

    def __init__(self, raw):
        self.raw = raw
        self.truncation = None
        self.conditions = set()

    @classmethod
    def decode(cls, content, header, entity_class):
        """
        :param content: (bytes) message contents, at most 32 octets
        :param header: (OmciHeader) frame header
        :param entity_class: (EntityClass) class addressed by the header
        """
        raise NotImplementedError

    def truncate(self, truncation):
        if truncation is not None:
            self.truncation = truncation
            self.conditions.add(DC.TruncatedBuffer)
            log.warning('content-truncated', content=self.name,
                        consumed=truncation.consumed,
                        expected=truncation.expected)

    @property
    def truncated(self):
        return self.truncation is not None

    @property
    def malformed(self):
        return DC.TruncatedBuffer in self.conditions or \
            DC.MalformedField in self.conditions

    def fields(self):
        return dict()

    def to_dict(self):
        d = dict(content=self.name,
                 conditions=sorted(c.value for c in self.conditions),
                 raw=hexstr(self.raw))
        if self.truncation is not None:
            d['truncation'] = self.truncation.to_dict()
        d.update(self.fields())
        return d

    def __repr__(self):
        return '{}({})'.format(self.name, ', '.join(
            '{}={!r}'.format(k, v) for k, v in sorted(self.fields().items())))


_result_code_fld = ByteField("result_code", None)
_attributes_mask_fld = ShortField("attributes_mask", None)


class OmciMaskedContent(OmciMessageContent):
    """Base for contents that carry an attribute mask"""
    name = "OmciMaskedContent"

    def __init__(self, raw):
        super(OmciMaskedContent, self).__init__(raw)
        self.attributes_mask = None
        self.attributes = []
        self.undefined_attributes = []

    @property
    def mask_bits(self):
        if self.attributes_mask is None:
            return None
        return '{:016b}'.format(self.attributes_mask)

    def fields(self):
        return dict(
            attributes_mask=self.attributes_mask,
            mask_bits=self.mask_bits,
            attributes=[a.to_dict() for a in self.attributes],
            undefined_attributes=list(self.undefined_attributes))


class OmciGetRequest(OmciMaskedContent):
    name = "OmciGetRequest"
    message_ids = (AR | MT.Get, AR | MT.GetCurrentData)

    data = OmciMaskedData("data", offset=2)

    @classmethod
    def decode(cls, content, header, entity_class):
        msg = cls(content)
        try:
            msg.attributes_mask = getfield_at(_attributes_mask_fld, content, 0)
        except OmciTruncatedBufferError as e:
            msg.truncate(OmciTruncation.from_error(content, e))
            return msg
        msg.attributes, msg.undefined_attributes = \
            cls.data.names(entity_class, msg.attributes_mask)
        return msg


class OmciGetResponse(OmciMaskedContent):
    name = "OmciGetResponse"
    message_ids = (AK | MT.Get, AK | MT.GetCurrentData)

    data = OmciMaskedData("data", offset=3)

    def __init__(self, raw):
        super(OmciGetResponse, self).__init__(raw)
        self.result_code = None

    @classmethod
    def decode(cls, content, header, entity_class):
        msg = cls(content)
        try:
            msg.result_code = getfield_at(_result_code_fld, content, 0)
            msg.attributes_mask = getfield_at(_attributes_mask_fld, content, 1)
        except OmciTruncatedBufferError as e:
            msg.truncate(OmciTruncation.from_error(content, e))
            return msg
        msg.attributes, msg.undefined_attributes, truncation = \
            cls.data.getfield(entity_class, msg.attributes_mask, content)
        msg.truncate(truncation)
        return msg

    def fields(self):
        d = super(OmciGetResponse, self).fields()
        d.update(result_code=self.result_code,
                 result=None if self.result_code is None
                 else result_code_name(self.result_code))
        return d


class OmciSetRequest(OmciMaskedContent):
    name = "OmciSetRequest"
    message_ids = (AR | MT.Set, AR | MT.SetTable)

    data = OmciMaskedData("data", offset=2)

    @classmethod
    def decode(cls, content, header, entity_class):
        msg = cls(content)
        try:
            msg.attributes_mask = getfield_at(_attributes_mask_fld, content, 0)
        except OmciTruncatedBufferError as e:
            msg.truncate(OmciTruncation.from_error(content, e))
            return msg
        msg.attributes, msg.undefined_attributes, truncation = \
            cls.data.getfield(entity_class, msg.attributes_mask, content)
        msg.truncate(truncation)
        return msg


class OmciResultResponse(OmciMessageContent):
    """Responses that are only decoded up to their result code"""
    name = "OmciResultResponse"
    message_ids = (AK | MT.Set, AK | MT.SetTable, AK | MT.Create,
                   AK | MT.MibReset, AK | MT.Test)

    def __init__(self, raw):
        super(OmciResultResponse, self).__init__(raw)
        self.result_code = None

    @classmethod
    def decode(cls, content, header, entity_class):
        msg = cls(content)
        try:
            msg.result_code = getfield_at(_result_code_fld, content, 0)
        except OmciTruncatedBufferError as e:
            msg.truncate(OmciTruncation.from_error(content, e))
        return msg

    def fields(self):
        return dict(result_code=self.result_code,
                    result=None if self.result_code is None
                    else result_code_name(self.result_code))


class OmciCreateRequest(OmciMessageContent):
    name = "OmciCreateRequest"
    message_ids = (AR | MT.Create,)

    data = OmciCreateData("data", offset=0)

    def __init__(self, raw):
        super(OmciCreateRequest, self).__init__(raw)
        self.attributes = []

    @classmethod
    def decode(cls, content, header, entity_class):
        msg = cls(content)
        msg.attributes, truncation = cls.data.getfield(entity_class, content)
        msg.truncate(truncation)
        return msg

    def fields(self):
        return dict(attributes=[a.to_dict() for a in self.attributes])


class OmciMibUploadResponse(OmciMessageContent):
    name = "OmciMibUploadResponse"
    message_ids = (AK | MT.MibUpload,)

    _number_of_commands_fld = ShortField("number_of_commands", None)

    def __init__(self, raw):
        super(OmciMibUploadResponse, self).__init__(raw)
        self.number_of_commands = None

    @classmethod
    def decode(cls, content, header, entity_class):
        msg = cls(content)
        try:
            msg.number_of_commands = getfield_at(
                cls._number_of_commands_fld, content, 0)
        except OmciTruncatedBufferError as e:
            msg.truncate(OmciTruncation.from_error(content, e))
        return msg

    def fields(self):
        return dict(number_of_commands=self.number_of_commands)


class OmciMibUploadNext(OmciMessageContent):
    name = "OmciMibUploadNext"
    message_ids = (AR | MT.MibUploadNext,)

    _command_sequence_number_fld = ShortField("command_sequence_number", None)

    def __init__(self, raw):
        super(OmciMibUploadNext, self).__init__(raw)
        self.command_sequence_number = None

    @classmethod
    def decode(cls, content, header, entity_class):
        msg = cls(content)
        try:
            msg.command_sequence_number = getfield_at(
                cls._command_sequence_number_fld, content, 0)
        except OmciTruncatedBufferError as e:
            msg.truncate(OmciTruncation.from_error(content, e))
        return msg

    def fields(self):
        return dict(command_sequence_number=self.command_sequence_number)


class OmciMibUploadNextResponse(OmciMaskedContent):
    name = "OmciMibUploadNextResponse"
    message_ids = (AK | MT.MibUploadNext,)

    _object_entity_class_fld = ShortField("object_entity_class", None)
    _object_entity_id_fld = ShortField("object_entity_id", None)
    object_data = OmciMaskedData("object_data", offset=6)

    def __init__(self, raw):
        super(OmciMibUploadNextResponse, self).__init__(raw)
        self.object_entity_class = None
        self.object_entity_id = None
        self.object_class = None

    @property
    def object_class_name(self):
        return None if self.object_class is None \
            else self.object_class.class_name

    @classmethod
    def decode(cls, content, header, entity_class):
        msg = cls(content)
        try:
            msg.object_entity_class = getfield_at(
                cls._object_entity_class_fld, content, 0)
            msg.object_class = entity_class_for(msg.object_entity_class)
            if msg.object_class.reserved:
                msg.conditions.add(DC.UnknownClass)
            msg.object_entity_id = getfield_at(
                cls._object_entity_id_fld, content, 2)
            msg.attributes_mask = getfield_at(_attributes_mask_fld, content, 4)
        except OmciTruncatedBufferError as e:
            msg.truncate(OmciTruncation.from_error(content, e))
            return msg
        msg.attributes, msg.undefined_attributes, truncation = \
            cls.object_data.getfield(msg.object_class, msg.attributes_mask,
                                     content)
        msg.truncate(truncation)
        return msg

    def fields(self):
        d = super(OmciMibUploadNextResponse, self).fields()
        d.update(object_entity_class=self.object_entity_class,
                 object_class_name=self.object_class_name,
                 object_entity_id=self.object_entity_id)
        return d


class OmciTestRequest(OmciMessageContent):
    name = "OmciTestRequest"
    message_ids = (AR | MT.Test,)

    _content_length_fld = ShortField("content_length", None)
    _test_id_fld = ByteField("test_id", None)

    def __init__(self, raw):
        super(OmciTestRequest, self).__init__(raw)
        self.content_length = None
        self.test_id = None

    @property
    def test_name(self):
        return None if self.test_id is None else test_id_name(self.test_id)

    @classmethod
    def decode(cls, content, header, entity_class):
        if entity_class is not AniG:
            return OmciClassNotImplemented.for_message(content, header,
                                                       entity_class)
        if header.device_id not in (DeviceIdentifier.Baseline,
                                    DeviceIdentifier.Extended):
            return OmciUnrendered.decode(content, header, entity_class)

        msg = cls(content)
        try:
            if header.device_id == DeviceIdentifier.Extended:
                msg.content_length = getfield_at(cls._content_length_fld,
                                                 content, 0)
                msg.test_id = getfield_at(cls._test_id_fld, content, 2)
            else:
                msg.test_id = getfield_at(cls._test_id_fld, content, 0)
        except OmciTruncatedBufferError as e:
            msg.truncate(OmciTruncation.from_error(content, e))
        return msg

    def fields(self):
        return dict(content_length=self.content_length, test_id=self.test_id,
                    test_name=self.test_name)


class OmciTestResult(OmciMessageContent):
    name = "OmciTestResult"
    message_ids = (MT.TestResult,)

    records_fld = OmciTestResultRecords("records", AniGTestResultItems)

    def __init__(self, raw):
        super(OmciTestResult, self).__init__(raw)
        self.records = []

    @classmethod
    def decode(cls, content, header, entity_class):
        if entity_class is not AniG:
            return OmciClassNotImplemented.for_message(content, header,
                                                       entity_class)
        msg = cls(content)
        msg.records, truncation = cls.records_fld.getfield(content)
        if any(r.malformed for r in msg.records):
            msg.conditions.add(DC.MalformedField)
        msg.truncate(truncation)
        return msg

    def record(self, name):
        for record in self.records:
            if record.name == name:
                return record
        return None

    def fields(self):
        return dict(records=[r.to_dict() for r in self.records])


class OmciAlarm(OmciMessageContent):
    name = "OmciAlarm"
    message_ids = (MT.Alarm,)

    alarm_bit_map = OmciAlarmBitmap("alarm_bit_map")
    _sequence_number_fld = ByteField("alarm_sequence_number", None)

    def __init__(self, raw):
        super(OmciAlarm, self).__init__(raw)
        self.alarms = []
        self.alarm_names = {}
        self.zero_padding = None
        self.alarm_sequence_number = None

    @property
    def all_clear(self):
        return not self.alarms

    @classmethod
    def decode(cls, content, header, entity_class):
        msg = cls(content)
        msg.alarms, truncation = cls.alarm_bit_map.getfield(content)
        for n in msg.alarms:
            name = entity_class.alarm_name(alarm_table_number(n))
            if name is not None:
                msg.alarm_names[n] = name
        if truncation is not None:
            msg.truncate(truncation)
            return msg

        padding_end = AlarmBitmapSize + AlarmPaddingSize
        try:
            msg.alarm_sequence_number = getfield_at(
                cls._sequence_number_fld, content, padding_end)
        except OmciTruncatedBufferError as e:
            msg.truncate(OmciTruncation.from_error(content, e))
        msg.zero_padding = content[AlarmBitmapSize:padding_end]
        return msg

    def fields(self):
        return dict(alarms=list(self.alarms),
                    alarm_names=dict((str(k), v)
                                     for k, v in self.alarm_names.items()),
                    all_clear=self.all_clear,
                    zero_padding=hexstr(self.zero_padding),
                    alarm_sequence_number=self.alarm_sequence_number)


class OmciUnrendered(OmciMessageContent):
    """Message type / direction combination without a decode path"""
    name = "OmciUnrendered"

    @classmethod
    def decode(cls, content, header, entity_class):
        msg = cls(content)
        msg.conditions.add(DC.UnsupportedMessageCombination)
        return msg


class OmciClassNotImplemented(OmciMessageContent):
    """Class specific decode path invoked for a class it does not cover"""
    name = "OmciClassNotImplemented"

    def __init__(self, raw, message_type_name=None, class_name=None):
        super(OmciClassNotImplemented, self).__init__(raw)
        self.message_type_name = message_type_name
        self.class_name = class_name
        self.conditions.add(DC.UnimplementedForClass)

    @classmethod
    def for_message(cls, content, header, entity_class):
        msg = cls(content, header.message_type_name, entity_class.class_name)
        log.debug('not-implemented-for-class',
                  message_type=msg.message_type_name,
                  class_id=entity_class.class_id)
        return msg

    @classmethod
    def decode(cls, content, header, entity_class):
        return cls.for_message(content, header, entity_class)

    def fields(self):
        return dict(message_type=self.message_type_name,
                    class_name=self.class_name,
                    description='{} for ME class {} is not implemented'.format(
                        self.message_type_name, self.class_name))


# content class lookup table from message_id values
content_classes = [
    c for _, c in inspect.getmembers(
        sys.modules[__name__],
        lambda o: inspect.isclass(o) and
        issubclass(o, OmciMessageContent) and
        o.message_ids)
]
message_id_to_class_map = dict(
    (mid, c) for c in content_classes for mid in c.message_ids)


def decode_content(content, header, entity_class):
    """
    Decode the message contents of a frame. Never raises for malformed
    input; the returned content carries the conditions it ran into.

    :param content: (bytes) message contents, at most 32 octets
    :param header: (OmciHeader) frame header
    :param entity_class: (EntityClass) class addressed by the header
    :return: (OmciMessageContent) decoded contents
    """
    cls = message_id_to_class_map.get(header.message_id, OmciUnrendered)
    msg = cls.decode(content, header, entity_class)
    log.debug('content-decoded', message_id=header.message_id,
              content=msg.name, conditions=sorted(
                  c.value for c in msg.conditions))
    return msg
