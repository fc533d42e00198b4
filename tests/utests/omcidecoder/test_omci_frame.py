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

import simplejson

from omcidecoder.omci_defs import DecodeCondition
from omcidecoder.omci_entities import CircuitPack, OntData, Cardholder, \
    AniG, Tcont
from omcidecoder.omci_frame import decode_frame, decode_header
from omcidecoder.omci_messages import OmciGetRequest, OmciGetResponse, \
    OmciSetRequest, OmciCreateRequest, OmciResultResponse, \
    OmciMibUploadResponse, OmciMibUploadNext, OmciMibUploadNextResponse, \
    OmciAlarm, OmciTestRequest, OmciTestResult, OmciUnrendered, \
    OmciClassNotImplemented

DC = DecodeCondition


def hex2raw(hex_string):
    return unhexlify(hex_string.replace(' ', ''))


def content(hex_string, octets=32):
    """Zero fill message contents to the given number of octets"""
    hex_string = hex_string.replace(' ', '')
    return hex_string + '00' * (octets - len(hex_string) // 2)


class TestOmciFrameHeader(TestCase):

    def test_header_fields(self):
        header = decode_header(hex2raw('0001490a00060002'))
        self.assertEqual(header.transaction_id, 1)
        self.assertEqual(header.destination_bit, 0)
        self.assertEqual(header.ack_request, 1)
        self.assertEqual(header.ack, 0)
        self.assertEqual(header.message_type, 9)
        self.assertEqual(header.message_type_name, 'Get')
        self.assertEqual(header.device_id, 0x0a)
        self.assertFalse(header.extended)
        self.assertEqual(header.entity_class, 6)
        self.assertEqual(header.entity_id, 2)
        self.assertEqual(header.message_id, 0x49)

    def test_destination_bit_is_not_part_of_message_id(self):
        header = decode_header(hex2raw('0001c90b00060002'))
        self.assertEqual(header.destination_bit, 1)
        self.assertEqual(header.message_id, 0x49)
        self.assertTrue(header.extended)


class TestOmciFrameDecode(TestCase):

    reference_get_request_hex = (
        '00 00 49 0a'
        '00 06 01 01'
        '08 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 28'
    )

    reference_get_response_hex = (
        '00 00 29 0a'
        '00 06 01 01'
        '00 08 00 50'
        '4d 43 53 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 28'
    )

    def test_get_request(self):
        result = decode_frame(hex2raw(self.reference_get_request_hex))
        self.assertEqual(result.me_class_id, 6)
        self.assertIs(result.entity_class, CircuitPack)
        self.assertEqual(result.me_class_name, 'Circuit Pack')
        self.assertEqual(result.me_instance_id, 0x101)
        self.assertIsNone(result.trailer)
        self.assertEqual(result.conditions, set())

        omci = result.omci_message
        self.assertIsInstance(omci, OmciGetRequest)
        self.assertEqual(omci.attributes_mask, 0x800)
        self.assertEqual(omci.mask_bits, '0000100000000000')
        self.assertEqual([a.name for a in omci.attributes], ['vendor_id'])
        self.assertIsNone(omci.attributes[0].value)

    def test_get_response(self):
        result = decode_frame(hex2raw(self.reference_get_response_hex))
        omci = result.omci_message
        self.assertIsInstance(omci, OmciGetResponse)
        self.assertEqual(omci.result_code, 0)
        self.assertEqual(omci.fields()['result'], 'success')
        self.assertEqual(omci.attributes_mask, 0x800)
        self.assertEqual(len(omci.attributes), 1)
        self.assertEqual(omci.attributes[0].name, 'vendor_id')
        self.assertEqual(omci.attributes[0].offset, 3)
        self.assertEqual(omci.attributes[0].value, b'PMCS')
        self.assertFalse(result.malformed)

    def test_get_response_values_decoded_on_failure(self):
        frame = hex2raw('0000290a00060101' + content('09 0800 50 4d 43 53'))
        omci = decode_frame(frame).omci_message
        self.assertEqual(omci.fields()['result'],
                         'attribute failed or unknown')
        self.assertEqual(omci.attributes[0].value, b'PMCS')

    def test_set_tcont(self):
        ref = '0003480A010680008000040000000000' \
              '00000000000000000000000000000000' \
              '000000000000000000000028'
        result = decode_frame(hex2raw(ref))
        self.assertIs(result.entity_class, Tcont)
        self.assertEqual(result.me_instance_id, 0x8000)
        omci = result.omci_message
        self.assertIsInstance(omci, OmciSetRequest)
        self.assertEqual([(a.name, a.offset, a.value) for a in omci.attributes],
                         [('alloc_id', 2, 0x400)])

    def test_set_response(self):
        result = decode_frame(hex2raw('0003280a01068000' + content('03')))
        omci = result.omci_message
        self.assertIsInstance(omci, OmciResultResponse)
        self.assertEqual(omci.result_code, 3)
        self.assertEqual(omci.fields()['result'], 'parameter error')

    def test_create_gem_port_network_ctp(self):
        ref = '000C440A010C01000400800003010000' \
              '00000000000000000000000000000000' \
              '000000000000000000000028'
        omci = decode_frame(hex2raw(ref)).omci_message
        self.assertIsInstance(omci, OmciCreateRequest)
        values = dict((a.name, a.value) for a in omci.attributes)
        self.assertEqual(values, dict(
            port_id_value=0x400,
            t_cont_pointer=0x8000,
            direction=3,
            traffic_management_pointer_for_upstream=0x100,
            traffic_descriptor_profile_pointer=0,
            priority_queue_pointer_for_downstream=0,
            traffic_descriptor_profile_pointer_for_downstream=0,
            encryption_key_ring=0))

    def test_create_mac_bridge_service_profile(self):
        ref = '000B440A002D02010001008000140002' \
              '000f0001000000000000000000000000' \
              '000000000000000000000028'
        omci = decode_frame(hex2raw(ref)).omci_message
        values = dict((a.name, a.value) for a in omci.attributes)
        self.assertEqual(values['spanning_tree_ind'], 0)
        self.assertEqual(values['learning_ind'], 1)
        self.assertEqual(values['priority'], 0x8000)
        self.assertEqual(values['max_age'], 20 * 256)
        self.assertEqual(values['hello_time'], 2 * 256)
        self.assertEqual(values['forward_delay'], 15 * 256)
        self.assertEqual(values['unknown_mac_address_discard'], 1)
        self.assertEqual(omci.attributes[-1].name,
                         'dynamic_filtering_ageing_time')
        self.assertEqual(omci.attributes[-1].offset, 13)

    def test_mib_upload_request_is_unrendered(self):
        ref = '00304D0A000200000000000000000000' \
              '00000000000000000000000000000000' \
              '000000000000000000000028'
        result = decode_frame(hex2raw(ref))
        self.assertIs(result.entity_class, OntData)
        self.assertIsInstance(result.omci_message, OmciUnrendered)
        self.assertEqual(result.conditions,
                         {DC.UnsupportedMessageCombination})
        self.assertEqual(result.omci_message.raw, b'\x00' * 32)

    def test_mib_upload_response(self):
        omci = decode_frame(hex2raw('00302d0a00020000' + content('0015'))
                            ).omci_message
        self.assertIsInstance(omci, OmciMibUploadResponse)
        self.assertEqual(omci.number_of_commands, 21)

    def test_mib_upload_next_request(self):
        omci = decode_frame(hex2raw('00314e0a00020000' + content('0014'))
                            ).omci_message
        self.assertIsInstance(omci, OmciMibUploadNext)
        self.assertEqual(omci.command_sequence_number, 20)

    def test_mib_reset_response(self):
        omci = decode_frame(hex2raw('00012f0a00020000' + content('00'))
                            ).omci_message
        self.assertIsInstance(omci, OmciResultResponse)
        self.assertEqual(omci.result_code, 0)

    def test_ack_request_and_ack_together_are_unrendered(self):
        result = decode_frame(hex2raw('0001690a00060002' + content('8000')))
        self.assertIsInstance(result.omci_message, OmciUnrendered)


class TestMibUploadNextResponse(TestCase):

    reference_cardholder_hex = (
        '00042e0a0002000000050101f0002f2f05202020202020202020202020202020'
        '202020202000000000000028d4eb4bdf')

    reference_circuit_pack_hex = (
        '000a2e0a0002000000060101f0002f054252434d123456780000000000000000'
        '00000000000c000000000028585c2083')

    def test_cardholder(self):
        result = decode_frame(hex2raw(self.reference_cardholder_hex))
        self.assertIs(result.entity_class, OntData)
        omci = result.omci_message
        self.assertIsInstance(omci, OmciMibUploadNextResponse)
        self.assertEqual(omci.object_entity_class, 5)
        self.assertIs(omci.object_class, Cardholder)
        self.assertEqual(omci.object_entity_id, 0x101)
        self.assertEqual(omci.attributes_mask, 0xf000)
        self.assertEqual(
            [(a.name, a.offset) for a in omci.attributes],
            [('actual_plug_in_unit_type', 6),
             ('expected_plug_in_unit_type', 7),
             ('expected_port_count', 8),
             ('expected_equipment_id', 9)])
        self.assertEqual(omci.attributes[0].value, 0x2f)
        self.assertEqual(omci.attributes[2].value, 5)
        self.assertEqual(omci.attributes[3].value, b' ' * 20)
        # 48 octets: no trailer
        self.assertIsNone(result.trailer)

    def test_circuit_pack(self):
        result = decode_frame(hex2raw(self.reference_circuit_pack_hex))
        omci = result.omci_message
        self.assertIs(omci.object_class, CircuitPack)
        values = dict((a.name, a.value) for a in omci.attributes)
        self.assertEqual(values['type'], 0x2f)
        self.assertEqual(values['number_of_ports'], 5)
        self.assertEqual(values['serial_number'], b'BRCM\x12\x34\x56\x78')
        self.assertEqual(values['version'], b'\x00' * 13 + b'\x0c')

    def test_summary_names_uploaded_class(self):
        result = decode_frame(hex2raw(self.reference_circuit_pack_hex))
        self.assertEqual(result.summary(),
                         'ONU< MIB Upload Next' + ' ' * 5 +
                         ' - ONU Data (Circuit Pack)')

    def test_trailer_when_longer_than_48_octets(self):
        result = decode_frame(
            hex2raw(self.reference_circuit_pack_hex + 'deadbeef'))
        self.assertEqual(result.trailer.cpcs_uu_cpi, 0)
        self.assertEqual(result.trailer.cpcs_sdu_length, 0x28)
        self.assertEqual(result.trailer.crc32, 0x585c2083)
        self.assertEqual(result.to_dict()['trailer']['crc32'], 0x585c2083)

    def test_extended_format(self):
        frame = hex2raw('00102e0b00020000' '0020' +
                        content('00060101 f000 2f 05 4252434d12345678') +
                        '000000280be43cf4')
        result = decode_frame(frame)
        self.assertEqual(result.message_length, 0x20)
        omci = result.omci_message
        self.assertEqual(omci.object_entity_id, 0x101)
        self.assertEqual(omci.attributes[2].value, b'BRCM\x12\x34\x56\x78')
        self.assertEqual(result.trailer.crc32, 0x0be43cf4)
        self.assertEqual(result.conditions, set())

    def test_unknown_uploaded_class(self):
        result = decode_frame(hex2raw('00102e0a00020000' +
                                      content('00c80001 c000')))
        omci = result.omci_message
        self.assertTrue(omci.object_class.reserved)
        self.assertEqual(omci.object_class_name,
                         'reserved for future B-PON managed entities')
        self.assertEqual(omci.attributes, [])
        self.assertEqual(omci.undefined_attributes, [1, 2])
        self.assertIn(DC.UnknownClass, result.conditions)


class TestAlarmAndTest(TestCase):

    def test_alarm(self):
        frame = hex2raw('0000100a01070000' +
                        content('a0')[:-2] + '07')
        result = decode_frame(frame)
        self.assertIs(result.entity_class, AniG)
        omci = result.omci_message
        self.assertIsInstance(omci, OmciAlarm)
        self.assertEqual(omci.alarms, [5, 7])
        self.assertEqual(omci.alarm_names, {5: 'Signal fail',
                                            7: 'Low received optical power'})
        self.assertFalse(omci.all_clear)
        self.assertEqual(omci.zero_padding, b'\x00\x00\x00')
        self.assertEqual(omci.alarm_sequence_number, 7)
        self.assertEqual(result.summary(),
                         'ONU< Alarm' + ' ' * 15 + ' - ANI-G')

    def test_alarm_names_count_from_most_significant_bit(self):
        frame = hex2raw('0000100a01070000' +
                        content('80')[:-2] + '07')
        result = decode_frame(frame)
        omci = result.omci_message
        self.assertIsInstance(omci, OmciAlarm)
        self.assertEqual(result.conditions, set())
        self.assertEqual(omci.alarms, [7])
        self.assertEqual(omci.alarm_names, {7: 'Low received optical power'})
        self.assertEqual(omci.alarm_sequence_number, 7)

    def test_alarm_without_a_name(self):
        omci = decode_frame(hex2raw('0000100a01070000' + content('01'))
                            ).omci_message
        self.assertEqual(omci.alarms, [0])
        self.assertEqual(omci.alarm_names, {})
        self.assertFalse(omci.all_clear)

    def test_alarm_all_clear(self):
        omci = decode_frame(hex2raw('0000100a00060101' + content(''))
                            ).omci_message
        self.assertEqual(omci.alarms, [])
        self.assertTrue(omci.all_clear)
        self.assertEqual(omci.alarm_sequence_number, 0)

    def test_alarm_without_sequence_number(self):
        result = decode_frame(hex2raw('0000100a00060101' + content('', 30)))
        omci = result.omci_message
        self.assertIsNone(omci.alarm_sequence_number)
        self.assertEqual(omci.truncation.consumed, 30)
        self.assertEqual(omci.truncation.expected, 32)
        self.assertIn(DC.TruncatedBuffer, result.conditions)

    def test_test_result(self):
        frame = hex2raw('00051b0a01070000' +
                        content('01000a 03ffec 05000a 090005 0c0100'))
        result = decode_frame(frame)
        omci = result.omci_message
        self.assertIsInstance(omci, OmciTestResult)
        self.assertEqual(omci.record('power_feed_voltage').value, 200)
        self.assertAlmostEqual(omci.record('received_optical_power').value,
                               -30.04)
        self.assertEqual(omci.record('temperature').value, 1.0)
        self.assertIsNone(omci.record('no_such_record'))
        self.assertEqual(result.conditions, set())

    def test_test_result_tag_mismatch(self):
        frame = hex2raw('00051b0a01070000' +
                        content('01000a 04ffec 05000a 090005 0c0100'))
        result = decode_frame(frame)
        omci = result.omci_message
        self.assertTrue(omci.record('received_optical_power').malformed)
        self.assertEqual(omci.record('laser_bias_current').value, 10)
        self.assertEqual(result.conditions, {DC.MalformedField})
        self.assertTrue(result.malformed)

    def test_test_result_for_other_class(self):
        ref = ('00001B0a014c0000008000202020202020202020202020202020202020202020'
               '2020202020202020000000280be43cf4')
        result = decode_frame(hex2raw(ref))
        omci = result.omci_message
        self.assertIsInstance(omci, OmciClassNotImplemented)
        self.assertEqual(result.conditions, {DC.UnimplementedForClass})
        self.assertEqual(
            omci.fields()['description'],
            'Test Result for ME class Enhanced security control '
            'is not implemented')

    def test_test_request_baseline(self):
        omci = decode_frame(hex2raw('0006520a01070000' + content('07'))
                            ).omci_message
        self.assertIsInstance(omci, OmciTestRequest)
        self.assertIsNone(omci.content_length)
        self.assertEqual(omci.test_id, 7)
        self.assertEqual(omci.test_name, 'self test')

    def test_test_request_extended(self):
        result = decode_frame(hex2raw('0006520b01070000' '0003' +
                                      content('0001 08')))
        omci = result.omci_message
        self.assertEqual(omci.content_length, 1)
        self.assertEqual(omci.test_id, 8)
        self.assertEqual(omci.test_name, 'vendor specific')

    def test_test_request_other_device_id(self):
        omci = decode_frame(hex2raw('0006520c01070000' + content('07'))
                            ).omci_message
        self.assertIsInstance(omci, OmciUnrendered)

    def test_test_request_other_class(self):
        result = decode_frame(hex2raw('0006520a00060101' + content('07')))
        self.assertIsInstance(result.omci_message, OmciClassNotImplemented)
        self.assertIn(DC.UnimplementedForClass, result.conditions)


class TestMalformedFrames(TestCase):

    def test_too_short(self):
        for length in range(8):
            result = decode_frame(hex2raw('0001490a00060002')[:length])
            self.assertTrue(result.too_short)
            self.assertIsNone(result.header)
            self.assertIsNone(result.omci_message)
            self.assertEqual(result.conditions, {DC.FrameTooShort})
        self.assertEqual(result.summary(), 'OMCI frame too short (7 octets)')
        self.assertEqual(result.to_dict(),
                         dict(frame_length=7, conditions=['FrameTooShort']))

    def test_header_only(self):
        result = decode_frame(hex2raw('0001490a00060002'))
        self.assertFalse(result.too_short)
        self.assertEqual(result.me_class_name, 'Circuit Pack')
        omci = result.omci_message
        self.assertIsInstance(omci, OmciGetRequest)
        self.assertIsNone(omci.attributes_mask)
        self.assertEqual(omci.truncation.consumed, 0)
        self.assertEqual(omci.truncation.expected, 2)
        self.assertEqual(result.conditions, {DC.TruncatedBuffer})
        self.assertTrue(result.malformed)

    def test_truncated_attribute_values(self):
        # vendor_id occupies octets 3 to 6, only 3 and 4 are present
        result = decode_frame(hex2raw('0000290a00060101' '00 0800 50 4d'))
        omci = result.omci_message
        self.assertEqual(omci.attributes, [])
        self.assertEqual(omci.truncation.consumed, 3)
        self.assertEqual(omci.truncation.expected, 7)

    def test_truncated_extended_length(self):
        result = decode_frame(hex2raw('0001490b00060002' '00'))
        self.assertIsNone(result.message_length)
        self.assertIn(DC.TruncatedBuffer, result.conditions)

    def test_truncated_trailer(self):
        frame = hex2raw('00102e0b00020000' '0020' + content('0002') +
                        '00000028585c20')
        self.assertEqual(len(frame), 49)
        result = decode_frame(frame)
        self.assertIsNone(result.trailer)
        self.assertIn(DC.TruncatedBuffer, result.conditions)

    def test_unknown_class(self):
        result = decode_frame(hex2raw('0001490a00c80001' + content('c000')))
        self.assertEqual(result.me_class_name,
                         'reserved for future B-PON managed entities')
        self.assertEqual(result.conditions, {DC.UnknownClass})
        omci = result.omci_message
        self.assertEqual(omci.attributes, [])
        self.assertEqual(omci.undefined_attributes, [1, 2])

    def test_reserved_message_type(self):
        result = decode_frame(hex2raw('0001410a00060001' + content('')))
        self.assertEqual(result.message_type_name, 'Reserved')
        self.assertIsInstance(result.omci_message, OmciUnrendered)

    def test_accepts_bytearray(self):
        frame = bytearray(hex2raw(TestOmciFrameDecode.reference_get_request_hex))
        result = decode_frame(frame)
        self.assertEqual(result.omci_message.attributes_mask, 0x800)


class TestResultRendering(TestCase):

    def test_summary(self):
        result = decode_frame(
            hex2raw(TestOmciFrameDecode.reference_get_request_hex))
        self.assertEqual(result.summary(),
                         'OLT> Get' + ' ' * 17 + ' - Circuit Pack')

    def test_to_dict_is_json_ready(self):
        for ref in (TestOmciFrameDecode.reference_get_response_hex,
                    TestMibUploadNextResponse.reference_circuit_pack_hex,
                    '0000100a01070000' + content('05'),
                    '00051b0a01070000' + content('01000a03ffec')):
            d = decode_frame(hex2raw(ref)).to_dict()
            self.assertEqual(simplejson.loads(simplejson.dumps(d)), d)

    def test_to_dict(self):
        d = decode_frame(
            hex2raw(TestOmciFrameDecode.reference_get_response_hex)).to_dict()
        self.assertEqual(d['transaction_id'], 0)
        self.assertEqual(d['message_type_name'], 'Get')
        self.assertEqual(d['me_class_name'], 'Circuit Pack')
        self.assertEqual(d['me_instance_id'], 0x101)
        omci = d['omci_message']
        self.assertEqual(omci['content'], 'OmciGetResponse')
        self.assertEqual(omci['result'], 'success')
        self.assertEqual(omci['mask_bits'], '0000100000000000')
        self.assertEqual(omci['attributes'][0]['value'], '504d4353')
        self.assertEqual(omci['conditions'], [])


class TestPublicSurface(TestCase):

    def test_aggregate_module(self):
        from omcidecoder import omci
        self.assertIs(omci.decode_frame, decode_frame)
        self.assertIs(omci.entity_class_for(6), omci.CircuitPack)
        self.assertEqual(omci.message_type_name(9), 'Get')
        result = omci.decode_frame(
            hex2raw(TestOmciFrameDecode.reference_get_request_hex))
        self.assertIsInstance(result.omci_message, omci.OmciGetRequest)


if __name__ == '__main__':
    main()
