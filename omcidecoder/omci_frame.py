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
import structlog
from scapy.fields import BitField, ShortField, XByteField, XShortField, \
    XIntField
from scapy.packet import Packet

from omcidecoder.omci_defs import DeviceIdentifier, DecodeCondition, \
    OmciFrameTooShortError, OmciTruncatedBufferError, message_type_name, \
    OmciHeaderSize, OmciExtendedLengthSize, OmciContentSize, \
    OmciTrailerSize, OmciTrailerThreshold
from omcidecoder.omci_entities import entity_class_for
from omcidecoder.omci_fields import getfield_at, hexstr
from omcidecoder.omci_messages import OmciMibUploadNextResponse, \
    decode_content, message_id


log = structlog.get_logger()

DC = DecodeCondition


class OmciHeader(Packet):
    name = "OmciHeader"
    fields_desc = [
        ShortField("transaction_id", 0),
        BitField("destination_bit", 0, 1),
        BitField("ack_request", 0, 1),
        BitField("ack", 0, 1),
        BitField("message_type", 0, 5),
        XByteField("device_id", DeviceIdentifier.Baseline),
        ShortField("entity_class", None),
        ShortField("entity_id", 0),
    ]

    @property
    def message_id(self):
        return message_id(self.message_type, self.ack_request, self.ack)

    @property
    def message_type_name(self):
        return message_type_name(self.message_type)

    @property
    def extended(self):
        return self.device_id == DeviceIdentifier.Extended


class OmciTrailer(Packet):
    name = "OmciTrailer"
    fields_desc = [
        XShortField("cpcs_uu_cpi", 0),
        ShortField("cpcs_sdu_length", 0x28),
        XIntField("crc32", 0),
    ]


_message_length_fld = ShortField("message_length", None)


def decode_header(buffer):
    """
    :param buffer: (bytes) frame
    :return: (OmciHeader) the fixed 8 octet header
    :raises OmciFrameTooShortError: fewer than 8 octets
    """
    if len(buffer) < OmciHeaderSize:
        raise OmciFrameTooShortError(len(buffer))
    return OmciHeader(buffer[:OmciHeaderSize])


class OmciDecodeResult(object):
    """Everything decoded from one frame"""

    def __init__(self, frame_length):
        self.frame_length = frame_length
        self.header = None
        self.entity_class = None
        self.message_length = None
        self.omci_message = None
        self.trailer = None
        self.conditions = set()

    @property
    def too_short(self):
        return DC.FrameTooShort in self.conditions

    @property
    def me_class_id(self):
        return None if self.header is None else self.header.entity_class

    @property
    def me_class_name(self):
        return None if self.entity_class is None \
            else self.entity_class.class_name

    @property
    def me_instance_id(self):
        return None if self.header is None else self.header.entity_id

    @property
    def message_type_name(self):
        return None if self.header is None else self.header.message_type_name

    @property
    def malformed(self):
        return self.too_short or DC.TruncatedBuffer in self.conditions or \
            DC.MalformedField in self.conditions

    def summary(self):
        """
        One line summary: direction, message type padded for alignment,
        and the managed entity class
        """
        if self.header is None:
            return 'OMCI frame too short ({} octets)'.format(self.frame_length)

        direction = 'OLT>' if self.header.ack_request else 'ONU<'
        msg_type = '{} {}'.format(direction, self.message_type_name)
        class_name = self.me_class_name
        if isinstance(self.omci_message, OmciMibUploadNextResponse) and \
                self.omci_message.object_class_name is not None:
            class_name = '{} ({})'.format(
                class_name, self.omci_message.object_class_name)
        return '{:<25} - {}'.format(msg_type, class_name)

    def to_dict(self):
        d = dict(frame_length=self.frame_length,
                 conditions=sorted(c.value for c in self.conditions))
        if self.header is None:
            return d

        header = self.header
        d.update(transaction_id=header.transaction_id,
                 destination_bit=header.destination_bit,
                 ack_request=header.ack_request,
                 ack=header.ack,
                 message_type=header.message_type,
                 message_type_name=header.message_type_name,
                 device_id=header.device_id,
                 me_class_id=self.me_class_id,
                 me_class_name=self.me_class_name,
                 me_instance_id=self.me_instance_id,
                 summary=self.summary())
        if self.message_length is not None:
            d['message_length'] = self.message_length
        if self.omci_message is not None:
            d['omci_message'] = self.omci_message.to_dict()
        if self.trailer is not None:
            d['trailer'] = dict(cpcs_uu_cpi=self.trailer.cpcs_uu_cpi,
                                cpcs_sdu_length=self.trailer.cpcs_sdu_length,
                                crc32=self.trailer.crc32)
        return d

    def __repr__(self):
        return 'OmciDecodeResult({})'.format(self.summary())


def decode_frame(buffer):
    """
    Decode one OMCI frame. Malformed input never raises: the result is
    annotated with the conditions that were met instead.

    :param buffer: (bytes, bytearray or memoryview) frame as on the wire
    :return: (OmciDecodeResult)
    """
    buffer = bytes(buffer)
    result = OmciDecodeResult(len(buffer))

    try:
        header = decode_header(buffer)
    except OmciFrameTooShortError as e:
        log.warning('frame-too-short', length=e.length)
        result.conditions.add(DC.FrameTooShort)
        return result

    result.header = header
    result.entity_class = entity_class_for(header.entity_class)
    if result.entity_class.reserved:
        result.conditions.add(DC.UnknownClass)

    offset = OmciHeaderSize
    if header.extended:
        try:
            result.message_length = getfield_at(_message_length_fld, buffer,
                                                offset)
        except OmciTruncatedBufferError as e:
            log.warning('message-length-truncated', available=e.available)
            result.conditions.add(DC.TruncatedBuffer)
        offset += OmciExtendedLengthSize

    content = buffer[offset:offset + OmciContentSize]
    result.omci_message = decode_content(content, header, result.entity_class)
    result.conditions |= result.omci_message.conditions
    offset += OmciContentSize

    if len(buffer) > OmciTrailerThreshold:
        trailer = buffer[offset:offset + OmciTrailerSize]
        if len(trailer) == OmciTrailerSize:
            result.trailer = OmciTrailer(trailer)
        else:
            log.warning('trailer-truncated', offset=offset,
                        available=len(trailer))
            result.conditions.add(DC.TruncatedBuffer)

    log.debug('frame-decoded', transaction_id=header.transaction_id,
              message_type=header.message_type_name,
              class_id=header.entity_class, entity_id=header.entity_id,
              content=result.omci_message.name, raw=hexstr(buffer))
    return result
