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
from binascii import unhexlify
from unittest import TestCase, main

from omcidecoder.omci_defs import MessageType, DecodeCondition
from omcidecoder.omci_entities import CircuitPack, AniG, GalEthernetProfile
from omcidecoder.omci_frame import OmciHeader
from omcidecoder.omci_messages import decode_content, message_id, \
    message_id_to_class_map, OmciGetRequest, OmciGetResponse, \
    OmciSetRequest, OmciCreateRequest, OmciResultResponse, OmciAlarm, \
    OmciTestResult, OmciUnrendered

MT = MessageType
DC = DecodeCondition


def header(message_type, ack_request=0, ack=0, entity_class=CircuitPack,
           device_id=0x0a):
    return OmciHeader(transaction_id=1,
                      ack_request=ack_request,
                      ack=ack,
                      message_type=message_type,
                      device_id=device_id,
                      entity_class=entity_class.class_id,
                      entity_id=1)


class TestContentDispatch(TestCase):

    def test_message_id(self):
        self.assertEqual(message_id(MT.Get, 1, 0), 0x49)
        self.assertEqual(message_id(MT.Get, 0, 1), 0x29)
        self.assertEqual(message_id(MT.Alarm, 0, 0), 0x10)

    def test_dispatch_table(self):
        expected = {
            0x49: OmciGetRequest, 0x5c: OmciGetRequest,
            0x29: OmciGetResponse, 0x3c: OmciGetResponse,
            0x48: OmciSetRequest, 0x5d: OmciSetRequest,
            0x28: OmciResultResponse, 0x3d: OmciResultResponse,
            0x24: OmciResultResponse, 0x2f: OmciResultResponse,
            0x32: OmciResultResponse,
            0x44: OmciCreateRequest,
            0x10: OmciAlarm,
            0x1b: OmciTestResult,
        }
        for mid, cls in expected.items():
            self.assertIs(message_id_to_class_map[mid], cls, hex(mid))

    def test_no_decode_path_for_other_combinations(self):
        for mid in (0x09, 0x46, 0x26, 0x4b, 0x4f, 0x50, 0x11, 0x30):
            self.assertNotIn(mid, message_id_to_class_map, hex(mid))

    def test_get_current_data_shares_get_layout(self):
        msg = decode_content(unhexlify('000800' '504d4353'),
                             header(MT.GetCurrentData, ack=1),
                             CircuitPack)
        self.assertIsInstance(msg, OmciGetResponse)
        self.assertEqual(msg.attributes[0].value, b'PMCS')

    def test_set_table_shares_set_layout(self):
        msg = decode_content(unhexlify('0800' '504d4353'),
                             header(MT.SetTable, ack_request=1),
                             CircuitPack)
        self.assertIsInstance(msg, OmciSetRequest)
        self.assertEqual(msg.attributes[0].offset, 2)
        self.assertEqual(msg.attributes[0].value, b'PMCS')

    def test_create_truncated(self):
        msg = decode_content(unhexlify('00'),
                             header(MT.Create, ack_request=1,
                                    entity_class=GalEthernetProfile),
                             GalEthernetProfile)
        self.assertIsInstance(msg, OmciCreateRequest)
        self.assertEqual(msg.attributes, [])
        self.assertTrue(msg.truncated)
        self.assertEqual(msg.conditions, {DC.TruncatedBuffer})

    def test_unrendered_keeps_raw_content(self):
        raw = unhexlify('0102030405')
        msg = decode_content(raw, header(MT.Reboot, ack_request=1),
                             CircuitPack)
        self.assertIsInstance(msg, OmciUnrendered)
        self.assertEqual(msg.raw, raw)
        self.assertEqual(msg.to_dict()['raw'], '0102030405')
        self.assertEqual(msg.conditions, {DC.UnsupportedMessageCombination})

    def test_test_result_empty_content(self):
        msg = decode_content(b'', header(MT.TestResult, entity_class=AniG),
                             AniG)
        self.assertEqual(len(msg.records), 5)
        self.assertTrue(all(r.truncated for r in msg.records))
        self.assertEqual(msg.truncation.consumed, 0)
        self.assertEqual(msg.truncation.expected, 15)
        self.assertEqual(msg.conditions, {DC.TruncatedBuffer})

    def test_repr(self):
        msg = decode_content(unhexlify('0800'),
                             header(MT.Get, ack_request=1), CircuitPack)
        self.assertIn('attributes_mask=2048', repr(msg))


if __name__ == '__main__':
    main()
