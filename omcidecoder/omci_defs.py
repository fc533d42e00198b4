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
from enum import Enum, IntEnum


class OmciError(Exception):
    pass


class OmciTruncatedBufferError(OmciError):
    """
    Raised when a field would extend past the end of the supplied buffer.
    Nothing is read when this is raised.
    """
    def __init__(self, offset, needed, available):
        super(OmciTruncatedBufferError, self).__init__(
            'need {} octet(s) at offset {}, only {} available'.format(
                needed, offset, available))
        self.offset = offset
        self.needed = needed
        self.available = available


class OmciFrameTooShortError(OmciError):
    def __init__(self, length):
        super(OmciFrameTooShortError, self).__init__(
            'frame of {} octet(s) is shorter than the {} octet header'.format(
                length, OmciHeaderSize))
        self.length = length


def bitpos_from_mask(mask, lsb_pos=0, increment=1):
    """
    Turn a decimal value (bitmask) into a list of indices where each
    index value corresponds to the bit position of a bit that was set (1)
    in the mask. What numbers are assigned to the bit positions is controlled
    by lsb_pos and increment, as explained below.
    :param mask: a decimal value used as a bit mask
    :param lsb_pos: The decimal value associated with the LSB bit
    :param increment: If this is +i, then the bit next to LSB will take
    the decimal value of lsb_pos + i.
    :return: List of bit positions where the bit was set in mask
    """
    out = []
    while mask:
        if mask & 0x01:
            out.append(lsb_pos)
        lsb_pos += increment
        mask >>= 1
    return sorted(out)


class AttributeAccess(Enum):
    Readable = 1
    R = 1
    Writable = 2
    W = 2
    SetByCreate = 3
    SBC = 3


class DeviceIdentifier(IntEnum):
    Baseline = 0x0a     # ITU-T G.984.4
    Extended = 0x0b     # ITU-T G.988, extra 2 octet message length


OmciHeaderSize = 8
OmciExtendedLengthSize = 2
OmciContentSize = 32
OmciTrailerSize = 8
OmciTrailerThreshold = 48   # trailer present when the frame is longer
OmciEthertype = 0x88b5


class MessageType(IntEnum):
    # numbers match the 5 bit msg_type field per ITU-T G.988
    Create = 4
    CreateCompleteConnection = 5
    Delete = 6
    DeleteCompleteConnection = 7
    Set = 8
    Get = 9
    GetCompleteConnection = 10
    GetAllAlarms = 11
    GetAllAlarmsNext = 12
    MibUpload = 13
    MibUploadNext = 14
    MibReset = 15
    Alarm = 16
    AttributeValueChange = 17
    Test = 18
    StartSoftwareDownload = 19
    DownloadSection = 20
    EndSoftwareDownload = 21
    ActivateSoftware = 22
    CommitSoftware = 23
    SynchronizeTime = 24
    Reboot = 25
    GetNext = 26
    TestResult = 27
    GetCurrentData = 28
    SetTable = 29


_message_type_names = {
    MessageType.Create: 'Create',
    MessageType.CreateCompleteConnection: 'Create Complete Connection',
    MessageType.Delete: 'Delete',
    MessageType.DeleteCompleteConnection: 'Delete Complete Connection',
    MessageType.Set: 'Set',
    MessageType.Get: 'Get',
    MessageType.GetCompleteConnection: 'Get Complete Connection',
    MessageType.GetAllAlarms: 'Get All Alarms',
    MessageType.GetAllAlarmsNext: 'Get All Alarms Next',
    MessageType.MibUpload: 'MIB Upload',
    MessageType.MibUploadNext: 'MIB Upload Next',
    MessageType.MibReset: 'MIB Reset',
    MessageType.Alarm: 'Alarm',
    MessageType.AttributeValueChange: 'Attribute Value Change',
    MessageType.Test: 'Test',
    MessageType.StartSoftwareDownload: 'Start Software Download',
    MessageType.DownloadSection: 'Download Section',
    MessageType.EndSoftwareDownload: 'End Software Download',
    MessageType.ActivateSoftware: 'Activate Software',
    MessageType.CommitSoftware: 'Commit Software',
    MessageType.SynchronizeTime: 'Synchronize Time',
    MessageType.Reboot: 'Reboot',
    MessageType.GetNext: 'Get Next',
    MessageType.TestResult: 'Test Result',
    MessageType.GetCurrentData: 'Get Current Data',
    MessageType.SetTable: 'Set Table',
}


def message_type_name(code):
    """Name of a 5 bit message type code, 'Reserved' outside 4..29"""
    if 4 <= code <= 29:
        return _message_type_names[MessageType(code)]
    return 'Reserved'


class ReasonCodes(IntEnum):
    # OMCI Result and reason codes
    Success = 0,            # Command processed successfully
    ProcessingError = 1,    # Command processing error
    NotSupported = 2,       # Command not supported
    ParameterError = 3,     # Parameter error
    UnknownEntity = 4,      # Unknown managed entity
    UnknownInstance = 5,    # Unknown managed entity instance
    DeviceBusy = 6,         # Device busy
    InstanceExists = 7,     # Instance Exists (Create response only)
    AttributeFailure = 9,   # Attribute(s) failed or unknown


_result_code_names = {
    ReasonCodes.Success: 'success',
    ReasonCodes.ProcessingError: 'processing error',
    ReasonCodes.NotSupported: 'not supported',
    ReasonCodes.ParameterError: 'parameter error',
    ReasonCodes.UnknownEntity: 'unknown managed entity',
    ReasonCodes.UnknownInstance: 'unknown instance',
    ReasonCodes.DeviceBusy: 'device busy',
    ReasonCodes.InstanceExists: 'instance exists',
    ReasonCodes.AttributeFailure: 'attribute failed or unknown',
}


def result_code_name(code):
    if code in _result_code_names:
        return _result_code_names[ReasonCodes(code)]
    return 'unknown'


OmciSelfTestId = 7


def test_id_name(code):
    if 0 <= code <= 6:
        return 'reserved'
    elif code == OmciSelfTestId:
        return 'self test'
    return 'vendor specific'


class DecodeCondition(Enum):
    """Recoverable conditions a decode result can be annotated with"""
    UnknownClass = 'UnknownClass'
    UnsupportedMessageCombination = 'UnsupportedMessageCombination'
    MalformedField = 'MalformedField'
    TruncatedBuffer = 'TruncatedBuffer'
    UnimplementedForClass = 'UnimplementedForClass'
    FrameTooShort = 'FrameTooShort'
