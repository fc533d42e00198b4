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
from collections import namedtuple
from functools import lru_cache

from scapy.fields import ByteField, ShortField, IntField, LongField, \
    StrFixedLenField

from omcidecoder.omci_defs import AttributeAccess, bitpos_from_mask


SelectedAttribute = namedtuple('SelectedAttribute', 'index attribute offset')


class EntityClassAttribute(object):

    def __init__(self, fld, access=frozenset()):
        """
        Initialize an Attribute for a Managed Entity Class

        :param fld: (Field) Scapy field type, its width is the on-wire width
        :param access: (AttributeAccess) Allowed access
        """
        self._fld = fld
        self._access = access

    @property
    def field(self):
        return self._fld

    @property
    def name(self):
        return self._fld.name

    @property
    def access(self):
        return self._access

    @property
    def settable_on_create(self):
        return AttributeAccess.SetByCreate in self._access

    @property
    def length(self):
        """On-wire width of the attribute in octets"""
        if isinstance(self._fld, StrFixedLenField):
            return self._fld.length_from(None)
        return self._fld.sz


class EntityClassMeta(type):
    """
    Metaclass for EntityClass to generate secondary class attributes
    for class attributes of the derived classes.
    """
    def __init__(cls, name, bases, dct):
        super(EntityClassMeta, cls).__init__(name, bases, dct)

        # initialize attribute_name_to_index_map
        cls.attribute_name_to_index_map = dict(
            (a.name, idx) for idx, a in enumerate(cls.attributes))


class EntityClass(object, metaclass=EntityClassMeta):

    class_id = 'to be filled by subclass'
    class_name = 'to be filled by subclass'
    attributes = []
    alarms = dict()       # Alarm Number -> Alarm Name
    reserved = False      # True for classes synthesized for ids not in the table

    # will be map of attr_name -> index in attributes, initialized by metaclass
    attribute_name_to_index_map = None

    byte1_mask_to_attr_indices = dict(
        (m, bitpos_from_mask(m, 8, -1)) for m in range(256))
    byte2_mask_to_attr_indices = dict(
        (m, bitpos_from_mask(m, 16, -1)) for m in range(256))

    @classmethod
    def attribute_indices_from_mask(cls, mask):
        # each bit in the 2-byte field denote an attribute index; we use a
        # lookup table to make lookup a bit faster
        return \
            cls.byte1_mask_to_attr_indices[(mask >> 8) & 0xff] + \
            cls.byte2_mask_to_attr_indices[(mask & 0xff)]

    @classmethod
    def mask_for(cls, *attr_names):
        """
        Return mask value corresponding to given attributes names
        :param attr_names: Attribute names
        :return: integer mask value
        """
        mask = 0
        for attr_name in attr_names:
            index = cls.attribute_name_to_index_map[attr_name]
            mask |= (1 << (16 - index))
        return mask

    @classmethod
    def attribute_count(cls):
        """Number of addressable attributes, managed_entity_id excluded"""
        return max(len(cls.attributes) - 1, 0)

    @classmethod
    def select_attributes(cls, mask, offset=0):
        """
        Resolve an attribute mask against this class

        :param mask: (int) 16 bit attribute mask, MSB is attribute 1
        :param offset: (int) offset of the first selected attribute value
        :return: (list, list) SelectedAttribute tuples in ascending index
                 order with cumulative offsets, and the indices selected by
                 the mask that this class does not define
        """
        selected = []
        undefined = []
        for index in cls.attribute_indices_from_mask(mask):
            if index >= len(cls.attributes):
                undefined.append(index)
                continue
            attribute = cls.attributes[index]
            selected.append(SelectedAttribute(index, attribute, offset))
            offset += attribute.length
        return selected, undefined

    @classmethod
    def create_attributes(cls, offset=0):
        """Set-by-create attributes in order, as carried by a Create request"""
        selected = []
        for index, attribute in enumerate(cls.attributes):
            if index == 0 or not attribute.settable_on_create:
                continue
            selected.append(SelectedAttribute(index, attribute, offset))
            offset += attribute.length
        return selected

    @classmethod
    def alarm_name(cls, alarm_number):
        return cls.alarms.get(alarm_number)


# abbreviations
ECA = EntityClassAttribute
AA = AttributeAccess


class OntData(EntityClass):
    class_id = 2
    class_name = 'ONU Data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("mib_data_sync", None), {AA.R}),
    ]


class Cardholder(EntityClass):
    class_id = 5
    class_name = 'Cardholder'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("actual_plug_in_unit_type", None), {AA.R}),
        ECA(ByteField("expected_plug_in_unit_type", None), {AA.R}),
        ECA(ByteField("expected_port_count", None), {AA.R}),
        ECA(StrFixedLenField("expected_equipment_id", None, 20), {AA.R}),
        ECA(StrFixedLenField("actual_equipment_id", None, 20), {AA.R}),
        ECA(ByteField("protection_profile_pointer", None), {AA.R}),
        ECA(ByteField("invoke_protection_switch", None), {AA.R}),
    ]
    alarms = {
        0: 'Plug-in circuit pack missing',
        1: 'Plug-in type mismatch alarm',
        2: 'Improper card removal',
        3: 'Plug-in equipment ID mismatch alarm',
        4: 'Protection switch',
    }


class CircuitPack(EntityClass):
    class_id = 6
    class_name = 'Circuit Pack'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("type", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("number_of_ports", None), {AA.R}),
        ECA(StrFixedLenField("serial_number", None, 8), {AA.R}),
        ECA(StrFixedLenField("version", None, 14), {AA.R}),
        ECA(StrFixedLenField("vendor_id", None, 4), {AA.R}),
        ECA(ByteField("administrative_state", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("operational_state", None), {AA.R}),
        ECA(ByteField("bridged_or_ip_ind", None), {AA.R}),
        ECA(StrFixedLenField("equipment_id", None, 20), {AA.R}),
        ECA(ByteField("card_configuration", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("total_t_cont_buffer_number", None), {AA.R}),
        ECA(ByteField("total_priority_queue_number", None), {AA.R}),
        ECA(ByteField("total_traffic_scheduler_number", None), {AA.R}),
        ECA(IntField("power_shed_override", None), {AA.R}),
    ]
    alarms = {
        0: 'Equipment alarm',
        1: 'Powering alarm',
        2: 'Self-test failure',
        3: 'Laser end of life',
        4: 'Temperature yellow',
        5: 'Temperature red',
    }


class SoftwareImage(EntityClass):
    class_id = 7
    class_name = 'Software Image'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(StrFixedLenField("version", None, 14), {AA.R}),
        ECA(ByteField("is_committed", None), {AA.R}),
        ECA(ByteField("is_active", None), {AA.R}),
        ECA(ByteField("is_valid", None), {AA.R}),
    ]


class PptpEthernetUni(EntityClass):
    class_id = 11
    class_name = 'PPTP Ethernet UNI'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("expected_type", None), {AA.R}),
        ECA(ByteField("sensed_type", None), {AA.R}),
        ECA(ByteField("auto_detection_configuration", None), {AA.R}),
        ECA(ByteField("ethernet_loopback_configuration", None), {AA.R}),
        ECA(ByteField("administrative_state", None), {AA.R}),
        ECA(ByteField("operational_state", None), {AA.R}),
        ECA(ByteField("configuration_ind", None), {AA.R}),
        ECA(ShortField("max_frame_size", None), {AA.R}),
        ECA(ByteField("dte_or_dce", None), {AA.R}),
        ECA(ShortField("pause_time", None), {AA.R}),
        ECA(ByteField("bridged_or_ip_ind", None), {AA.R}),
        ECA(ByteField("arc", None), {AA.R}),
        ECA(ByteField("arc_interval", None), {AA.R}),
        ECA(ByteField("pppoe_filter", None), {AA.R}),
        ECA(ByteField("power_control", None), {AA.R}),
    ]
    alarms = {
        0: 'LAN Loss Of Signal',
    }


class EthernetPMMonitoringHistoryData(EntityClass):
    class_id = 24
    class_name = 'Ethernet PM History Data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("fcs_errors_drop_events", None), {AA.R}),
        ECA(IntField("excessive_collision_counter", None), {AA.R}),
        ECA(IntField("late_collision_counter", None), {AA.R}),
        ECA(IntField("frames_too_long", None), {AA.R}),
        ECA(IntField("buffer_overflows_on_receive", None), {AA.R}),
        ECA(IntField("buffer_overflows_on_transmit", None), {AA.R}),
        ECA(IntField("single_collision_frame_counter", None), {AA.R}),
        ECA(IntField("multiple_collisions_frame_counter", None), {AA.R}),
        ECA(IntField("sqe_counter", None), {AA.R}),
        ECA(IntField("deferred_transmission_counter", None), {AA.R}),
        ECA(IntField("internal_mac_transmit_error_counter", None), {AA.R}),
        ECA(IntField("carrier_sense_error_counter", None), {AA.R}),
        ECA(IntField("alignment_error_counter", None), {AA.R}),
        ECA(IntField("internal_mac_receive_error_counter", None), {AA.R}),
    ]
    alarms = {
        0: 'FCS errors',
        1: 'Excessive collision counter',
        2: 'Late collision counter',
        3: 'Frames too long',
        4: 'Buffer overflows on receive',
        5: 'Buffer overflows on transmit',
        6: 'Single collision frame counter',
        7: 'Multiple collision frame counter',
        8: 'SQE counter',
        9: 'Deferred transmission counter',
        10: 'Internal MAC transmit error counter',
        11: 'Carrier sense error counter',
        12: 'Alignment error counter',
        13: 'Internal MAC receive error counter',
    }


class VendorSpecific(EntityClass):
    class_id = 44
    class_name = 'Vendor Specific'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("sub_entity", None), {AA.R, AA.W, AA.SBC}),
    ]


class MacBridgeServiceProfile(EntityClass):
    class_id = 45
    class_name = 'MAC Bridge Service Profile'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("spanning_tree_ind", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("learning_ind", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("port_bridging_ind", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("priority", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("max_age", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("hello_time", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("forward_delay", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("unknown_mac_address_discard", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("mac_learning_depth", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("dynamic_filtering_ageing_time", None), {AA.R, AA.W, AA.SBC}),
    ]


class MacBridgePortConfigurationData(EntityClass):
    class_id = 47
    class_name = 'MAC bridge port configuration data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("bridge_id_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("port_num", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("tp_type", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("tp_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("port_priority", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("port_path_cost", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("port_spanning_tree_ind", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("deprecated_1", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("deprecated_2", None), {AA.R, AA.W, AA.SBC}),
        ECA(StrFixedLenField("port_mac_address", None, 6), {AA.R}),
        ECA(ShortField("outbound_td_pointer", None), {AA.R}),
        ECA(ShortField("inbound_td_pointer", None), {AA.R}),
        ECA(ByteField("mac_learning_depth", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("lasp_id_pointer", None), {AA.R, AA.W, AA.SBC}),
    ]
    alarms = {
        0: 'Port blocking',
    }


class MacBridgePortDesignationData(EntityClass):
    class_id = 48
    class_name = 'MAC bridge port designation data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(StrFixedLenField("designated_bridge_root_cost_port", None, 24), {AA.R}),
        ECA(ByteField("port_state", None), {AA.R}),
    ]


class MacBridgePortFilterTableData(EntityClass):
    class_id = 49
    class_name = 'MAC bridge port filter table data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(LongField("mac_filter_table", None), {AA.R}),
    ]


class MacBridgePmHistoryData(EntityClass):
    class_id = 51
    class_name = 'MAC Bridge PM History Data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("bridge_learning_entry_discard_count", None), {AA.R}),
    ]


class MacBridgePortPmHistoryData(EntityClass):
    class_id = 52
    class_name = 'MAC Bridge Port PM History Data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("forwarded_frame_counter", None), {AA.R}),
        ECA(IntField("delay_exceeded_discard_counter", None), {AA.R}),
        ECA(IntField("mtu_exceeded_discard_counter", None), {AA.R}),
        ECA(IntField("received_frame_counter", None), {AA.R}),
        ECA(IntField("received_and_discarded_counter", None), {AA.R}),
    ]


class PptpPotsUni(EntityClass):
    class_id = 53
    class_name = 'Physical path termination point POTS UNI'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("administrative_state", None), {AA.R}),
        ECA(ShortField("deprecated", None), {AA.R}),
        ECA(ByteField("arc", None), {AA.R}),
        ECA(ByteField("arc_interval", None), {AA.R}),
        ECA(ByteField("impedance", None), {AA.R}),
        ECA(ByteField("transmission_path", None), {AA.R}),
        ECA(ByteField("rx_gain", None), {AA.R}),
        ECA(ByteField("tx_gain", None), {AA.R}),
        ECA(ByteField("operational_state", None), {AA.R}),
        ECA(ByteField("hook_state", None), {AA.R}),
        ECA(ShortField("pots_holdover_time", None), {AA.R}),
        ECA(ByteField("nominal_feed_voltage", None), {AA.R}),
        ECA(ByteField("loss_of_softswitch", None), {AA.R}),
    ]


class VoiceServiceProfile(EntityClass):
    class_id = 58
    class_name = 'Voice service profile'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("announcement_type", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("jitter_target", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("jitter_buffer_max", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("echo_cancel_ind", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("pstn_protocol_variant", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("dtmf_digit_levels", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("dtmf_digit_duration", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("hook_flash_minimum_time", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("hook_flash_maximum_time", None), {AA.R, AA.W, AA.SBC}),
        ECA(StrFixedLenField("tone_pattern_table", None, 20), {AA.R}),
        ECA(StrFixedLenField("tone_event_table", None, 7), {AA.R}),
        ECA(StrFixedLenField("ringing_pattern_table", None, 5), {AA.R}),
        ECA(StrFixedLenField("ringing_event_table", None, 7), {AA.R}),
        ECA(ShortField("network_specific_extensions_poi", None), {AA.R, AA.W, AA.SBC}),
    ]


class MacBridgePortFilterPreAssignTable(EntityClass):
    class_id = 79
    class_name = 'MAC bridge port filter preassign table'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("ipv4_multicast_filtering", None), {AA.R}),
        ECA(ByteField("ipv6_multicast_filtering", None), {AA.R}),
        ECA(ByteField("ipv4_broadcast_filtering", None), {AA.R}),
        ECA(ByteField("rarp_filtering", None), {AA.R}),
        ECA(ByteField("ipx_filtering", None), {AA.R}),
        ECA(ByteField("netbeui_filtering", None), {AA.R}),
        ECA(ByteField("appletalk_filtering", None), {AA.R}),
        ECA(ByteField("bridge_management_information_filtering", None), {AA.R}),
        ECA(ByteField("arp_filtering", None), {AA.R}),
    ]


class PptpVideoUni(EntityClass):
    class_id = 82
    class_name = 'PPTP Video UNI'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("administrative_state", None), {AA.R}),
        ECA(ByteField("operational_state", None), {AA.R}),
        ECA(ByteField("arc", None), {AA.R}),
        ECA(ByteField("arc_interval", None), {AA.R}),
        ECA(ByteField("power_control", None), {AA.R}),
    ]


class VlanTaggingFilterData(EntityClass):
    class_id = 84
    class_name = 'VLAN tagging filter data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(StrFixedLenField("vlan_filter_list", None, 24), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("forward_operation", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("number_of_entries", None), {AA.R, AA.W, AA.SBC}),
    ]


class EthernetPmHistoryData2(EntityClass):
    class_id = 89
    class_name = 'Ethernet PM History Data 2'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("pppoe_filtered_frame_counter", None), {AA.R}),
    ]


class PptpVideoAni(EntityClass):
    class_id = 90
    class_name = 'PPTP Video ANI'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("administrative_state", None), {AA.R}),
        ECA(ByteField("operational_state", None), {AA.R}),
        ECA(ByteField("arc", None), {AA.R}),
        ECA(ByteField("arc_interval", None), {AA.R}),
        ECA(ByteField("frequency_range_low", None), {AA.R}),
        ECA(ByteField("frequency_range_high", None), {AA.R}),
        ECA(ByteField("signal_capability", None), {AA.R}),
        ECA(ByteField("optical_signal_level", None), {AA.R}),
        ECA(ByteField("pilot_signal_level", None), {AA.R}),
        ECA(ByteField("signal_level_min", None), {AA.R}),
        ECA(ByteField("signal_level_max", None), {AA.R}),
        ECA(IntField("pilot_frequency", None), {AA.R}),
        ECA(ByteField("agc_mode", None), {AA.R}),
        ECA(ByteField("agc_setting", None), {AA.R}),
        ECA(ByteField("video_lower_optical_threshold", None), {AA.R}),
        ECA(ByteField("video_upper_optical_threshold", None), {AA.R}),
    ]


class Ieee8021pMapperServiceProfile(EntityClass):
    class_id = 130
    class_name = '802.1P Mapper Service Profile'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("tp_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("interwork_tp_pointer_for_p_bit_priority_0", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("interwork_tp_pointer_for_p_bit_priority_1", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("interwork_tp_pointer_for_p_bit_priority_2", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("interwork_tp_pointer_for_p_bit_priority_3", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("interwork_tp_pointer_for_p_bit_priority_4", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("interwork_tp_pointer_for_p_bit_priority_5", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("interwork_tp_pointer_for_p_bit_priority_6", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("interwork_tp_pointer_for_p_bit_priority_7", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("unmarked_frame_option", None), {AA.R, AA.W, AA.SBC}),
        ECA(StrFixedLenField("dscp_to_p_bit_mapping", None, 24), {AA.R}),
        ECA(ByteField("default_p_bit_marking", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("tp_type", None), {AA.R, AA.W, AA.SBC}),
    ]


class OltG(EntityClass):
    class_id = 131
    class_name = 'OLT-G'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(IntField("olt_vendor_id", None), {AA.R}),
        ECA(StrFixedLenField("equipment_id", None, 20), {AA.R}),
        ECA(StrFixedLenField("olt_version", None, 14), {AA.R}),
        ECA(StrFixedLenField("time_of_day_information", None, 14), {AA.R}),
    ]


class OntPowerShedding(EntityClass):
    class_id = 133
    class_name = 'ONT Power Shedding'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("restore_power_timer_reset_interval", None), {AA.R}),
        ECA(ShortField("data_class_shedding_interval", None), {AA.R}),
        ECA(ShortField("voice_class_shedding_interval", None), {AA.R}),
        ECA(ShortField("video_overlay_class_shedding_interval", None), {AA.R}),
        ECA(ShortField("video_return_class_shedding_interval", None), {AA.R}),
        ECA(ShortField("dsl_class_shedding_interval", None), {AA.R}),
        ECA(ShortField("atm_class_shedding_interval", None), {AA.R}),
        ECA(ShortField("ces_class_shedding_interval", None), {AA.R}),
        ECA(ShortField("frame_class_shedding_interval", None), {AA.R}),
        ECA(ShortField("sonet_class_shedding_interval", None), {AA.R}),
        ECA(ShortField("shedding_status", None), {AA.R}),
    ]


class IpHostConfigData(EntityClass):
    class_id = 134
    class_name = 'IP host config data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("ip_options", None), {AA.R}),
        ECA(StrFixedLenField("mac_address", None, 6), {AA.R}),
        ECA(StrFixedLenField("onu_identifier", None, 25), {AA.R}),
        ECA(IntField("ip_address", None), {AA.R}),
        ECA(IntField("mask", None), {AA.R}),
        ECA(IntField("gateway", None), {AA.R}),
        ECA(IntField("primary_dns", None), {AA.R}),
        ECA(IntField("secondary_dns", None), {AA.R}),
        ECA(IntField("current_address", None), {AA.R}),
        ECA(IntField("current_mask", None), {AA.R}),
        ECA(IntField("current_gateway", None), {AA.R}),
        ECA(IntField("current_primary_dns", None), {AA.R}),
        ECA(IntField("current_secondary_dns", None), {AA.R}),
        ECA(StrFixedLenField("domain_name", None, 25), {AA.R}),
        ECA(StrFixedLenField("host_name", None, 25), {AA.R}),
        ECA(ShortField("relay_agent_options", None), {AA.R}),
    ]


class TcpUdpConfigData(EntityClass):
    class_id = 136
    class_name = 'TCP/UDP config data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("port_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("protocol", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("tos_diffserv_field", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("ip_host_pointer", None), {AA.R, AA.W, AA.SBC}),
    ]


class NetworkAddress(EntityClass):
    class_id = 137
    class_name = 'Network address'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("security_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("address_pointer", None), {AA.R, AA.W, AA.SBC}),
    ]


class VoipConfigData(EntityClass):
    class_id = 138
    class_name = 'VoIP config data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("available_signalling_protocols", None), {AA.R}),
        ECA(ByteField("signalling_protocol_used", None), {AA.R}),
        ECA(IntField("available_voip_configuration_methods", None), {AA.R}),
        ECA(ByteField("voip_configuration_method_used", None), {AA.R}),
        ECA(ShortField("voip_configuration_address_pointer", None), {AA.R}),
        ECA(ByteField("voip_configuration_state", None), {AA.R}),
        ECA(ByteField("retrieve_profile", None), {AA.R}),
        ECA(StrFixedLenField("profile_version", None, 25), {AA.R}),
    ]


class VoipVoiceCtp(EntityClass):
    class_id = 139
    class_name = 'VoIP voice CTP'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("user_protocol_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("pptp_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("voip_media_profile_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("signalling_code", None), {AA.R, AA.W, AA.SBC}),
    ]


class VoipLineStatus(EntityClass):
    class_id = 141
    class_name = 'VoIP line status'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("voip_codec_used", None), {AA.R}),
        ECA(ByteField("voip_voice_server_status", None), {AA.R}),
        ECA(ByteField("voip_port_session_type", None), {AA.R}),
        ECA(ShortField("voip_call_1_packet_period", None), {AA.R}),
        ECA(ShortField("voip_call_2_packet_period", None), {AA.R}),
        ECA(StrFixedLenField("voip_call_1_dest_addr", None, 25), {AA.R}),
        ECA(StrFixedLenField("voip_call_2_dest_addr", None, 25), {AA.R}),
        ECA(ByteField("voip_line_state", None), {AA.R}),
        ECA(ByteField("emergency_call_status", None), {AA.R}),
    ]


class VoipMediaProfile(EntityClass):
    class_id = 142
    class_name = 'VoIP media profile'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("fax_mode", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("voice_service_profile_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("codec_selection_1st_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("packet_period_selection_1st_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("silence_suppression_1st_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("codec_selection_2nd_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("packet_period_selection_2nd_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("silence_suppression_2nd_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("codec_selection_3rd_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("packet_period_selection_3rd_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("silence_suppression_3rd_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("codec_selection_4th_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("packet_period_selection_4th_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("silence_suppression_4th_order", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("oob_dtmf", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("rtp_profile_pointer", None), {AA.R, AA.W, AA.SBC}),
    ]


class RtpProfileData(EntityClass):
    class_id = 143
    class_name = 'RTP profile data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("local_port_min", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("local_port_max", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("dscp_mark", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("piggyback_events", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("tone_events", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("dtmf_events", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("cas_events", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("ip_host_config_pointer", None), {AA.R}),
    ]


class NetworkDialPlanTable(EntityClass):
    class_id = 145
    class_name = 'Network dial plan table'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("dial_plan_number", None), {AA.R}),
        ECA(ShortField("dial_plan_table_max_size", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("critical_dial_timeout", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("partial_dial_timeout", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("dial_plan_format", None), {AA.R, AA.W, AA.SBC}),
        ECA(StrFixedLenField("dial_plan_table", None, 30), {AA.R}),
    ]


class VoipApplicationServiceProfile(EntityClass):
    class_id = 146
    class_name = 'VoIP application service profile'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("cid_features", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("call_waiting_features", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("call_progress_or_transfer_features", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("call_presentation_features", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("direct_connect_feature", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("direct_connect_uri_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("bridged_line_agent_uri_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("conference_factory_uri_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("dial_tone_feature_delay", None), {AA.R}),
        ECA(ShortField("ip_host_pointer", None), {AA.R}),
    ]


class AuthenticationSecurityMethod(EntityClass):
    class_id = 148
    class_name = 'Authentication security method'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("validation_scheme", None), {AA.R}),
        ECA(StrFixedLenField("username_1", None, 25), {AA.R}),
        ECA(StrFixedLenField("password", None, 25), {AA.R}),
        ECA(StrFixedLenField("realm", None, 25), {AA.R}),
        ECA(StrFixedLenField("username_2", None, 25), {AA.R}),
    ]


class SipAgentConfigData(EntityClass):
    class_id = 150
    class_name = 'SIP agent config data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("proxy_server_address_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("outbound_proxy_address_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("primary_sip_dns", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("secondary_sip_dns", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("tcp_udp_pointer", None), {AA.R}),
        ECA(IntField("sip_reg_exp_time", None), {AA.R}),
        ECA(IntField("sip_rereg_head_start_time", None), {AA.R}),
        ECA(ShortField("host_part_uri", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("sip_status", None), {AA.R}),
        ECA(ShortField("sip_registrar", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("softswitch", None), {AA.R, AA.W, AA.SBC}),
        ECA(StrFixedLenField("sip_response_table", None, 5), {AA.R}),
        ECA(ByteField("sip_option_transmit_control", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("sip_uri_format", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("redundant_sip_agent_pointer", None), {AA.R, AA.W, AA.SBC}),
    ]


class SipUserData(EntityClass):
    class_id = 153
    class_name = 'SIP user data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("sip_agent_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("user_part_aor", None), {AA.R, AA.W, AA.SBC}),
        ECA(StrFixedLenField("sip_display_name", None, 25), {AA.R}),
        ECA(ShortField("username_and_password", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("voicemail_server_sip_uri", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("voicemail_subscription_expiration_time", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("network_dial_plan_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("application_services_profile_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("feature_code_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("pptp_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("release_timer", None), {AA.R}),
        ECA(ByteField("receiver_off_hook_roh_timer", None), {AA.R}),
    ]


class LargeString(EntityClass):
    class_id = 157
    class_name = 'Large string'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("number_of_parts", None), {AA.R}),
        ECA(StrFixedLenField("part_1", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_2", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_3", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_4", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_5", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_6", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_7", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_8", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_9", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_10", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_11", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_12", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_13", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_14", None, 25), {AA.R}),
        ECA(StrFixedLenField("part_15", None, 25), {AA.R}),
    ]


class EquipmentProtectionProfile(EntityClass):
    class_id = 159
    class_name = 'Equipment protection profile'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("protect_slot_1_protect_slot_2", None), {AA.R, AA.W, AA.SBC}),
        ECA(LongField("working_slots", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("protect_status_1_protect_status_2", None), {AA.R}),
        ECA(ByteField("revertive_ind", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("wait_to_restore_time", None), {AA.R, AA.W, AA.SBC}),
    ]


class EquipmentExtensionPackage(EntityClass):
    class_id = 160
    class_name = 'Equipment extension package'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("environmental_sense", None), {AA.R}),
        ECA(ShortField("contact_closure_output", None), {AA.R}),
    ]


class ExtendedVlanTaggingOperationConfigurationData(EntityClass):
    class_id = 171
    class_name = 'Extended VLAN tagging operation configuration data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("association_type", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("received_frame_vlan_tagging_operation_table_max_size", None), {AA.R}),
        ECA(ShortField("input_tpid", None), {AA.R}),
        ECA(ShortField("output_tpid", None), {AA.R}),
        ECA(ByteField("downstream_mode", None), {AA.R}),
        ECA(StrFixedLenField("received_frame_vlan_tagging_operation_table", None, 16), {AA.R}),
        ECA(ShortField("associated_me_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(StrFixedLenField("dscp_to_p_bit_mapping", None, 24), {AA.R}),
    ]


class OntG(EntityClass):
    class_id = 256
    class_name = 'ONU-G'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(StrFixedLenField("vendor_id", None, 4), {AA.R}),
        ECA(StrFixedLenField("version", None, 14), {AA.R}),
        ECA(LongField("serial_nr", None), {AA.R}),
        ECA(ByteField("traffic_management_option", None), {AA.R}),
        ECA(ByteField("vp_vc_cross_connection_function_option", None), {AA.R}),
        ECA(ByteField("battery_backup", None), {AA.R}),
        ECA(ByteField("administrative_state", None), {AA.R}),
        ECA(ByteField("operational_state", None), {AA.R}),
    ]
    alarms = {
        0: 'Equipment alarm',
        1: 'Powering alarm',
        2: 'Battery missing',
        3: 'Battery failure',
        4: 'Battery low',
        5: 'Physical intrusion',
        6: 'Self-test failure',
        7: 'Dying gasp',
        8: 'Temperature yellow',
        9: 'Temperature red',
        10: 'Voltage yellow',
        11: 'Voltage red',
        12: 'ONU manual power off',
        13: 'Invalid image',
        14: 'PSE overload yellow',
        15: 'PSE overload red',
    }


class Ont2G(EntityClass):
    class_id = 257
    class_name = 'ONU2-G'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(StrFixedLenField("equipment_id", None, 20), {AA.R}),
        ECA(ByteField("omcc_version", None), {AA.R}),
        ECA(ShortField("vendor_product_code", None), {AA.R}),
        ECA(ByteField("security_capability", None), {AA.R}),
        ECA(ByteField("security_mode", None), {AA.R}),
        ECA(ShortField("total_priority_queue_number", None), {AA.R}),
        ECA(ByteField("total_traffic_scheduler_number", None), {AA.R}),
        ECA(ByteField("mode", None), {AA.R}),
        ECA(ShortField("total_gem_port_id_number", None), {AA.R}),
        ECA(IntField("sysup_time", None), {AA.R}),
    ]


class Tcont(EntityClass):
    class_id = 262
    class_name = 'T-CONT'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("alloc_id", None), {AA.R}),
        ECA(ByteField("mode_indicator", None), {AA.R}),
        ECA(ByteField("policy", None), {AA.R}),
    ]


class AniG(EntityClass):
    class_id = 263
    class_name = 'ANI-G'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("sr_indication", None), {AA.R}),
        ECA(ShortField("total_t_cont_number", None), {AA.R}),
        ECA(ShortField("gem_block_length", None), {AA.R}),
        ECA(ByteField("piggyback_dba_reporting", None), {AA.R}),
        ECA(ByteField("whole_ont_dba_reporting", None), {AA.R}),
        ECA(ByteField("sf_threshold", None), {AA.R}),
        ECA(ByteField("sd_threshold", None), {AA.R}),
        ECA(ByteField("arc", None), {AA.R}),
        ECA(ByteField("arc_interval", None), {AA.R}),
        ECA(ShortField("optical_signal_level", None), {AA.R}),
        ECA(ByteField("lower_optical_threshold", None), {AA.R}),
        ECA(ByteField("upper_optical_threshold", None), {AA.R}),
        ECA(ShortField("ont_response_time", None), {AA.R}),
        ECA(ShortField("transmit_optical_level", None), {AA.R}),
        ECA(ByteField("lower_transmit_power_threshold", None), {AA.R}),
        ECA(ByteField("upper_transmit_power_threshold", None), {AA.R}),
    ]
    alarms = {
        0: 'Low received optical power',
        1: 'High received optical power',
        2: 'Signal fail',
        3: 'Signal degrade',
        4: 'Low transmit optical power',
        5: 'High transmit optical power',
        6: 'Laser bias current',
    }


class UniG(EntityClass):
    class_id = 264
    class_name = 'UNI-G'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("config_option_status", None), {AA.R}),
        ECA(ByteField("administrative_state", None), {AA.R}),
    ]


class GemInterworkingTp(EntityClass):
    class_id = 266
    class_name = 'GEM interworking Termination Point'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("gem_port_network_ctp_connectivity_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("interworking_option", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("service_profile_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("interworking_termination_point_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("pptp_counter", None), {AA.R}),
        ECA(ByteField("operational_state", None), {AA.R}),
        ECA(ShortField("gal_profile_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("gal_loopback_configuration", None), {AA.R}),
    ]
    alarms = {
        6: 'Operational state change',
    }


class GemPortPmHistoryData(EntityClass):
    class_id = 267
    class_name = 'GEM Port PM History Data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("lost_packets", None), {AA.R}),
        ECA(IntField("misinserted_packets", None), {AA.R}),
        ECA(StrFixedLenField("received_packets", None, 5), {AA.R}),
        ECA(StrFixedLenField("received_blocks", None, 5), {AA.R}),
        ECA(StrFixedLenField("transmitted_blocks", None, 5), {AA.R}),
        ECA(IntField("impaired_blocks", None), {AA.R}),
    ]


class GemPortNetworkCtp(EntityClass):
    class_id = 268
    class_name = 'GEM Port Network CTP'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("port_id_value", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("t_cont_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("direction", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("traffic_management_pointer_for_upstream", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("traffic_descriptor_profile_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("uni_counter", None), {AA.R}),
        ECA(ShortField("priority_queue_pointer_for_downstream", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("encryption_state", None), {AA.R}),
        ECA(ShortField("traffic_descriptor_profile_pointer_for_downstream", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("encryption_key_ring", None), {AA.R, AA.W, AA.SBC}),
    ]
    alarms = {
        5: 'End-to-end loss of continuity',
    }


class GalTdmProfile(EntityClass):
    class_id = 271
    class_name = 'GAL TDM profile'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("gem_frame_loss_integration_period", None), {AA.R, AA.W, AA.SBC}),
    ]


class GalEthernetProfile(EntityClass):
    class_id = 272
    class_name = 'GAL Ethernet profile'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("maximum_gem_payload_size", None), {AA.R, AA.W, AA.SBC}),
    ]


class ThresholdData1(EntityClass):
    class_id = 273
    class_name = 'Threshold Data 1'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(IntField("threshold_value_1", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_2", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_3", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_4", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_5", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_6", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_7", None), {AA.R, AA.W, AA.SBC}),
    ]


class ThresholdData2(EntityClass):
    class_id = 274
    class_name = 'Threshold Data 2'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(IntField("threshold_value_8", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_9", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_10", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_11", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_12", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_13", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("threshold_value_14", None), {AA.R, AA.W, AA.SBC}),
    ]


class GalTdmPmHistoryData(EntityClass):
    class_id = 275
    class_name = 'GAL TDM PM History Data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("gem_frame_loss", None), {AA.R}),
        ECA(IntField("buffer_underflows", None), {AA.R}),
        ECA(IntField("buffer_overflows", None), {AA.R}),
    ]


class GalEthernetPmHistoryData(EntityClass):
    class_id = 276
    class_name = 'GAL Ethernet PM History Data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("discarded_frames", None), {AA.R}),
    ]


class PriorityQueueG(EntityClass):
    class_id = 277
    class_name = 'Priority queue'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("queue_configuration_option", None), {AA.R}),
        ECA(ShortField("maximum_queue_size", None), {AA.R}),
        ECA(ShortField("allocated_queue_size", None), {AA.R}),
        ECA(ShortField("discard_block_counter_reset_interval", None), {AA.R}),
        ECA(ShortField("threshold_value_for_discarded_blocks_due_to_buffer_overflow", None), {AA.R}),
        ECA(IntField("related_port", None), {AA.R}),
        ECA(ShortField("traffic_scheduler_pointer", None), {AA.R}),
        ECA(ByteField("weight", None), {AA.R}),
        ECA(ShortField("back_pressure_operation", None), {AA.R}),
        ECA(IntField("back_pressure_time", None), {AA.R}),
        ECA(ShortField("back_pressure_occur_queue_threshold", None), {AA.R}),
        ECA(ShortField("back_pressure_clear_queue_threshold", None), {AA.R}),
        ECA(LongField("packet_drop_queue_thresholds", None), {AA.R}),
        ECA(ShortField("packet_drop_max_p", None), {AA.R}),
        ECA(ByteField("queue_drop_w_q", None), {AA.R}),
        ECA(ByteField("drop_precedence_colour_marking", None), {AA.R}),
    ]
    alarms = {
        0: 'Block loss',
    }


class TrafficSchedulerG(EntityClass):
    class_id = 278
    class_name = 'Traffic Scheduler'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("tcont_pointer", None), {AA.R}),
        ECA(ShortField("traffic_shed_pointer", None), {AA.R}),
        ECA(ByteField("policy", None), {AA.R}),
        ECA(ByteField("priority_weight", None), {AA.R}),
    ]


class ProtectionData(EntityClass):
    class_id = 279
    class_name = 'Protection data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("working_ani_g_pointer", None), {AA.R}),
        ECA(ShortField("protection_ani_g_pointer", None), {AA.R}),
        ECA(ShortField("protection_type", None), {AA.R}),
        ECA(ByteField("revertive_ind", None), {AA.R}),
        ECA(ByteField("wait_to_restore_time", None), {AA.R}),
        ECA(ShortField("switching_guard_time", None), {AA.R}),
    ]


class MulticastGemInterworkingTp(EntityClass):
    class_id = 281
    class_name = 'Multicast GEM interworking termination point'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("gem_port_network_ctp_connectivity_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("interworking_option", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("service_profile_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("interworking_termination_point_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("pptp_counter", None), {AA.R}),
        ECA(ByteField("operational_state", None), {AA.R}),
        ECA(ShortField("gal_profile_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("gal_loopback_configuration", None), {AA.R, AA.W, AA.SBC}),
        ECA(StrFixedLenField("multicast_address_table", None, 12), {AA.R}),
    ]
    alarms = {
        0: 'Deprecated',
    }


class Omci(EntityClass):
    class_id = 287
    class_name = 'OMCI'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("me_type_table", None), {AA.R}),
        ECA(ShortField("message_type_table", None), {AA.R}),
    ]


class Dot1xPortExtensionPackage(EntityClass):
    class_id = 290
    class_name = 'Dot1X Port Extension Package'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("dot1x_enable", None), {AA.R}),
        ECA(ByteField("action_register", None), {AA.R}),
        ECA(ByteField("authenticator_pae_state", None), {AA.R}),
        ECA(ByteField("backend_authentication_state", None), {AA.R}),
        ECA(ByteField("admin_controlled_directions", None), {AA.R}),
        ECA(ByteField("operational_controlled_directions", None), {AA.R}),
        ECA(ByteField("authenticator_controlled_port_status", None), {AA.R}),
        ECA(ShortField("quiet_period", None), {AA.R}),
        ECA(ShortField("server_timeout_period", None), {AA.R}),
        ECA(ShortField("reauthentication_period", None), {AA.R}),
        ECA(ByteField("reauthentication_enabled", None), {AA.R}),
        ECA(ByteField("key_transmission_enabled", None), {AA.R}),
    ]


class EthernetPmHistoryData3(EntityClass):
    class_id = 296
    class_name = 'Ethernet PM History Data 3'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("drop_events", None), {AA.R}),
        ECA(IntField("octets", None), {AA.R}),
        ECA(IntField("packets", None), {AA.R}),
        ECA(IntField("broadcast_packets", None), {AA.R}),
        ECA(IntField("multicast_packets", None), {AA.R}),
        ECA(IntField("undersize_packets", None), {AA.R}),
        ECA(IntField("fragments", None), {AA.R}),
        ECA(IntField("jabbers", None), {AA.R}),
        ECA(IntField("packets_64_octets", None), {AA.R}),
        ECA(IntField("packets_65_to_127_octets", None), {AA.R}),
        ECA(IntField("packets_128_to_255_octets", None), {AA.R}),
        ECA(IntField("packets_256_to_511_octets", None), {AA.R}),
        ECA(IntField("packets_512_to_1023_octets", None), {AA.R}),
        ECA(IntField("packets_1024_to_1518_octets", None), {AA.R}),
    ]


class PortMappingPackage(EntityClass):
    class_id = 297
    class_name = 'Port mapping package'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("max_ports", None), {AA.R}),
        ECA(StrFixedLenField("port_list_1", None, 16), {AA.R}),
        ECA(StrFixedLenField("port_list_2", None, 16), {AA.R}),
        ECA(StrFixedLenField("port_list_3", None, 16), {AA.R}),
        ECA(StrFixedLenField("port_list_4", None, 16), {AA.R}),
        ECA(StrFixedLenField("port_list_5", None, 16), {AA.R}),
        ECA(StrFixedLenField("port_list_6", None, 16), {AA.R}),
        ECA(StrFixedLenField("port_list_7", None, 16), {AA.R}),
        ECA(StrFixedLenField("port_list_8", None, 16), {AA.R}),
    ]


class MulticastOperationsProfile(EntityClass):
    class_id = 309
    class_name = 'Multicast operations profile'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("igmp_version", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("igmp_function", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("immediate_leave", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("upstream_igmp_tci", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("upstream_igmp_tag_control", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("upstream_igmp_rate", None), {AA.R, AA.W, AA.SBC}),
        ECA(StrFixedLenField("dynamic_access_control_list_table", None, 24), {AA.R}),
        ECA(StrFixedLenField("static_access_control_list_table", None, 24), {AA.R}),
        ECA(StrFixedLenField("lost_groups_list_table", None, 10), {AA.R}),
        ECA(ByteField("robustness", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("querier_ip_address", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("query_interval", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("query_max_response_time", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("last_member_query_interval", None), {AA.R}),
    ]
    alarms = {
        0: 'Lost multicast group',
    }


class MulticastSubscriberConfigInfo(EntityClass):
    class_id = 310
    class_name = 'Multicast subscriber config info'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("me_type", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("multicast_operations_profile_pointer", None), {AA.R, AA.W, AA.SBC}),
        ECA(ShortField("max_simultaneous_groups", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("max_multicast_bandwidth", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("bandwidth_enforcement", None), {AA.R, AA.W, AA.SBC}),
    ]


class MulticastSubscriberMonitor(EntityClass):
    class_id = 311
    class_name = 'Multicast Subscriber Monitor'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("me_type", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("current_multicast_bandwidth", None), {AA.R}),
        ECA(IntField("max_join_messages_counter", None), {AA.R}),
        ECA(IntField("bandwidth_exceeded_counter", None), {AA.R}),
        ECA(StrFixedLenField("active_group_list_table", None, 24), {AA.R}),
    ]


class FecPerformanceMonitoringHistoryData(EntityClass):
    class_id = 312
    class_name = 'FEC PM History Data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("corrected_bytes", None), {AA.R}),
        ECA(IntField("corrected_code_words", None), {AA.R}),
        ECA(IntField("uncorrectable_code_words", None), {AA.R}),
        ECA(IntField("total_code_words", None), {AA.R}),
        ECA(ShortField("fec_seconds", None), {AA.R}),
    ]
    alarms = {
        0: 'Corrected bytes',
        1: 'Corrected code words',
        2: 'Uncorrectable code words',
        4: 'FEC seconds',
    }


class FileTransferController(EntityClass):
    class_id = 318
    class_name = 'File transfer controller'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("supported_transfer_protocols", None), {AA.R}),
        ECA(ShortField("file_type", None), {AA.R}),
        ECA(ShortField("file_instance", None), {AA.R}),
        ECA(ShortField("local_file_name_pointer", None), {AA.R}),
        ECA(ShortField("network_address_pointer", None), {AA.R}),
        ECA(ByteField("file_transfer_trigger", None), {AA.R}),
        ECA(ByteField("file_transfer_status", None), {AA.R}),
        ECA(ShortField("gem_iwtp_pointer", None), {AA.R}),
        ECA(ShortField("vlan", None), {AA.R}),
        ECA(IntField("file_size", None), {AA.R}),
        ECA(ByteField("directory_listing_table", None), {AA.R}),
    ]


class EthernetFrameDownstreamPerformanceMonitoringHistoryData(EntityClass):
    class_id = 321
    class_name = 'Ethernet Frame PM History Data DS'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("drop_events", None), {AA.R}),
        ECA(IntField("octets", None), {AA.R}),
        ECA(IntField("packets", None), {AA.R}),
        ECA(IntField("broadcast_packets", None), {AA.R}),
        ECA(IntField("multicast_packets", None), {AA.R}),
        ECA(IntField("crc_errored_packets", None), {AA.R}),
        ECA(IntField("undersize_packets", None), {AA.R}),
        ECA(IntField("oversize_packets", None), {AA.R}),
        ECA(IntField("packets_64_octets", None), {AA.R}),
        ECA(IntField("packets_65_to_127_octets", None), {AA.R}),
        ECA(IntField("packets_128_to_255_octets", None), {AA.R}),
        ECA(IntField("packets_256_to_511_octets", None), {AA.R}),
        ECA(IntField("packets_512_to_1023_octets", None), {AA.R}),
        ECA(IntField("packets_1024_to_1518_octets", None), {AA.R}),
    ]
    alarms = {
        0: 'Drop events',
        1: 'CRC errored packets',
        2: 'Undersize packets',
        3: 'Oversize packets',
    }


class EthernetFrameUpstreamPerformanceMonitoringHistoryData(EntityClass):
    class_id = 322
    class_name = 'Ethernet Frame PM History Data US'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R, AA.W, AA.SBC}),
        ECA(IntField("drop_events", None), {AA.R}),
        ECA(IntField("octets", None), {AA.R}),
        ECA(IntField("packets", None), {AA.R}),
        ECA(IntField("broadcast_packets", None), {AA.R}),
        ECA(IntField("multicast_packets", None), {AA.R}),
        ECA(IntField("crc_errored_packets", None), {AA.R}),
        ECA(IntField("undersize_packets", None), {AA.R}),
        ECA(IntField("oversize_packets", None), {AA.R}),
        ECA(IntField("packets_64_octets", None), {AA.R}),
        ECA(IntField("packets_65_to_127_octets", None), {AA.R}),
        ECA(IntField("packets_128_to_255_octets", None), {AA.R}),
        ECA(IntField("packets_256_to_511_octets", None), {AA.R}),
        ECA(IntField("packets_512_to_1023_octets", None), {AA.R}),
        ECA(IntField("packets_1024_to_1518_octets", None), {AA.R}),
    ]
    alarms = {
        0: 'Drop events',
        1: 'CRC errored packets',
        2: 'Undersize packets',
        3: 'Oversize packets',
    }


class VirtualEthernetInterfacePt(EntityClass):
    class_id = 329
    class_name = 'Virtual Ethernet interface point'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("administrative_state", None), {AA.R}),
        ECA(ByteField("operational_state", None), {AA.R}),
        ECA(StrFixedLenField("interdomain_name", None, 25), {AA.R}),
        ECA(ShortField("tcp_udp_pointer", None), {AA.R}),
        ECA(ShortField("iana_assigned_port", None), {AA.R}),
    ]
    alarms = {
        0: 'Connecting function fail',
    }


class EnhSecurityControl(EntityClass):
    class_id = 332
    class_name = 'Enhanced security control'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(StrFixedLenField("olt_crypto_capabilities", None, 16), {AA.R}),
        ECA(StrFixedLenField("olt_random_challenge_table", None, 17), {AA.R}),
        ECA(ByteField("olt_challenge_status", None), {AA.R}),
        ECA(ByteField("onu_selected_crypto_capabilities", None), {AA.R}),
        ECA(StrFixedLenField("onu_random_challenge_table", None, 16), {AA.R}),
        ECA(StrFixedLenField("onu_authentication_result_table", None, 16), {AA.R}),
        ECA(StrFixedLenField("olt_authentication_result_table", None, 17), {AA.R}),
        ECA(ByteField("olt_result_status", None), {AA.R}),
        ECA(ByteField("onu_authentication_status", None), {AA.R}),
        ECA(StrFixedLenField("master_session_key_name", None, 16), {AA.R}),
        ECA(StrFixedLenField("broadcast_key_table", None, 18), {AA.R}),
        ECA(ShortField("effective_key_length", None), {AA.R}),
    ]


class EthernetFrameExtendedPerformanceMonitoring(EntityClass):
    class_id = 334
    class_name = 'Ethernet frame extended PM'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(StrFixedLenField("control_block", None, 16), {AA.R}),
        ECA(IntField("drop_events", None), {AA.R}),
        ECA(IntField("octets", None), {AA.R}),
        ECA(IntField("frames", None), {AA.R}),
        ECA(IntField("broadcast_frames", None), {AA.R}),
        ECA(IntField("multicast_frames", None), {AA.R}),
        ECA(IntField("crc_errored_frames", None), {AA.R}),
        ECA(IntField("undersize_frames", None), {AA.R}),
        ECA(IntField("oversize_frames", None), {AA.R}),
        ECA(IntField("frames_64_octets", None), {AA.R}),
        ECA(IntField("frames_65_to_127_octets", None), {AA.R}),
        ECA(IntField("frames_128_to_255_octets", None), {AA.R}),
        ECA(IntField("frames_256_to_511_octets", None), {AA.R}),
        ECA(IntField("frames_512_to_1023_octets", None), {AA.R}),
        ECA(IntField("frames_1024_to_1518_octets", None), {AA.R}),
    ]
    alarms = {
        0: 'Drop events',
        1: 'CRC errored packets',
        2: 'Undersize packets',
        3: 'Oversize packets',
    }


class BbfTr069ManagementServer(EntityClass):
    class_id = 340
    class_name = 'BBF TR-069 management server'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("administrative_state", None), {AA.R}),
        ECA(ShortField("acs_network_address", None), {AA.R}),
        ECA(ShortField("associated_tag", None), {AA.R}),
    ]


class XgPonTcPerformanceMonitoringHistoryData(EntityClass):
    class_id = 344
    class_name = 'XG-PON TC performance monitoring history data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R}),
        ECA(IntField("psbd_hec_error_count", None), {AA.R}),
        ECA(IntField("xgtc_hec_error_count", None), {AA.R}),
        ECA(IntField("unknown_profile_count", None), {AA.R}),
        ECA(IntField("transmitted_xgem_frames", None), {AA.R}),
        ECA(IntField("fragment_xgem_frames", None), {AA.R}),
        ECA(IntField("xgem_hec_lost_words_count", None), {AA.R}),
        ECA(IntField("xgem_key_errors", None), {AA.R}),
        ECA(IntField("xgem_hec_error_count", None), {AA.R}),
        ECA(LongField("transmitted_bytes_in_non_idle_xgem_frames", None), {AA.R}),
        ECA(LongField("received_bytes_in_non_idle_xgem_frames", None), {AA.R}),
        ECA(IntField("lods_event_count", None), {AA.R}),
        ECA(IntField("lods_event_restored_count", None), {AA.R}),
        ECA(IntField("onu_reactivation_by_lods_events", None), {AA.R}),
    ]
    alarms = {
        1: 'PSBd HEC error count',
        2: 'XGTC HEC error count',
        3: 'Unknown profile count',
        4: 'XGEM HEC loss count',
        5: 'XGEM key errors',
        6: 'XGEM HEC error count',
    }


class XgPonDownstreamPerformanceMonitoringHistoryData(EntityClass):
    class_id = 345
    class_name = 'XG-PON downstream management performance monitoring history data'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(ShortField("threshold_data_1_2_id", None), {AA.R}),
        ECA(IntField("ploam_mic_error_count", None), {AA.R}),
        ECA(IntField("downstream_ploam_messages_count", None), {AA.R}),
        ECA(IntField("profile_messages_received", None), {AA.R}),
        ECA(IntField("ranging_time_messages_received", None), {AA.R}),
        ECA(IntField("deactivate_onu_id_messages_received", None), {AA.R}),
        ECA(IntField("disable_serial_number_messages_received", None), {AA.R}),
        ECA(IntField("request_registration_messages_received", None), {AA.R}),
        ECA(IntField("assign_alloc_id_messages_received", None), {AA.R}),
        ECA(IntField("key_control_messages_received", None), {AA.R}),
        ECA(IntField("sleep_allow_messages_received", None), {AA.R}),
        ECA(IntField("baseline_omci_messages_received_count", None), {AA.R}),
        ECA(IntField("extended_omci_messages_received_count", None), {AA.R}),
        ECA(IntField("assign_onu_id_messages_received", None), {AA.R}),
        ECA(IntField("omci_mic_error_count", None), {AA.R}),
    ]
    alarms = {
        1: 'PLOAM MIC error count',
        2: 'OMCI MIC error count',
    }


class PoeControl(EntityClass):
    class_id = 349
    class_name = 'PoE control'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ShortField("poe_capabilities", None), {AA.R}),
        ECA(ByteField("power_pair_pinout_control", None), {AA.R}),
        ECA(ByteField("operational_state", None), {AA.R}),
        ECA(ByteField("power_detection_status", None), {AA.R}),
        ECA(ByteField("power_classification_status", None), {AA.R}),
        ECA(ByteField("power_priority", None), {AA.R}),
        ECA(ShortField("invalid_signature_counter", None), {AA.R}),
        ECA(ShortField("power_denied_counter", None), {AA.R}),
        ECA(ShortField("overload_counter", None), {AA.R}),
        ECA(ShortField("short_counter", None), {AA.R}),
        ECA(ShortField("mps_absent_counter", None), {AA.R}),
        ECA(ByteField("pse_class_control", None), {AA.R}),
        ECA(IntField("current_power_consumption", None), {AA.R}),
    ]


class EthernetFrameExtendedPerformanceMonitoring64Bit(EntityClass):
    class_id = 425
    class_name = 'Ethernet frame extended PM 64 bit'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("interval_end_time", None), {AA.R}),
        ECA(StrFixedLenField("control_block", None, 16), {AA.R}),
        ECA(LongField("drop_events", None), {AA.R}),
        ECA(LongField("octets", None), {AA.R}),
        ECA(LongField("frames", None), {AA.R}),
        ECA(LongField("broadcast_frames", None), {AA.R}),
        ECA(LongField("multicast_frames", None), {AA.R}),
        ECA(LongField("crc_errored_frames", None), {AA.R}),
        ECA(LongField("undersize_frames", None), {AA.R}),
        ECA(LongField("oversize_frames", None), {AA.R}),
        ECA(LongField("frames_64_octets", None), {AA.R}),
        ECA(LongField("frames_65_to_127_octets", None), {AA.R}),
        ECA(LongField("frames_128_to_255_octets", None), {AA.R}),
        ECA(LongField("frames_256_to_511_octets", None), {AA.R}),
        ECA(LongField("frames_512_to_1023_octets", None), {AA.R}),
        ECA(LongField("frames_1024_to_1518_octets", None), {AA.R}),
    ]
    alarms = {
        0: 'Drop events',
        1: 'CRC errored packets',
        2: 'Undersize packets',
        3: 'Oversize packets',
    }


class TimeStatusMessage(EntityClass):
    class_id = 440
    class_name = 'Time Status Message'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("domain_number", None), {AA.R}),
        ECA(ByteField("flag_field", None), {AA.R}),
        ECA(ShortField("currentutcoffset", None), {AA.R}),
        ECA(ByteField("priority1", None), {AA.R}),
        ECA(ByteField("clockclass", None), {AA.R}),
        ECA(ByteField("accuracy", None), {AA.R}),
        ECA(ShortField("offsetscaledlogvariance", None), {AA.R}),
        ECA(ByteField("priority2", None), {AA.R}),
        ECA(LongField("grandmaster_id", None), {AA.R}),
        ECA(ShortField("steps_removed", None), {AA.R}),
        ECA(ByteField("time_source", None), {AA.R}),
    ]


class OnuLoopDetection(EntityClass):
    class_id = 65528
    class_name = 'ONU loop detection'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(IntField("operator_id", None), {AA.R}),
        ECA(ShortField("loop_detection_management", None), {AA.R}),
        ECA(ShortField("looped_port_down", None), {AA.R}),
        ECA(ShortField("loop_detection_message_frequency", None), {AA.R}),
        ECA(StrFixedLenField("port_and_vlan_table", None, 7), {AA.R}),
    ]


class OnuCapability(EntityClass):
    class_id = 65529
    class_name = 'ONU capability'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(IntField("operator_id", None), {AA.R}),
        ECA(ByteField("ctc_spec_version", None), {AA.R}),
        ECA(ByteField("onu_type", None), {AA.R}),
        ECA(ByteField("onu_tx_power_supply_control", None), {AA.R}),
    ]


class LoidAuthentication(EntityClass):
    class_id = 65530
    class_name = 'LOID authentication'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(IntField("operator_id", None), {AA.R}),
        ECA(StrFixedLenField("loid", None, 24), {AA.R}),
        ECA(StrFixedLenField("password", None, 12), {AA.R}),
        ECA(ByteField("authentication_status", None), {AA.R}),
    ]


class ExtendedMulticastOperationsProfiles(EntityClass):
    class_id = 65531
    class_name = 'Extended multicast operations profiles'
    attributes = [
        ECA(ShortField("managed_entity_id", None), {AA.R}),
        ECA(ByteField("igmp_version", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("igmp_function", None), {AA.R, AA.W, AA.SBC}),
        ECA(ByteField("immediate_leave", None), {AA.R}),
        ECA(ShortField("upstream_igmp_tci", None), {AA.R}),
        ECA(ByteField("upstream_igmp_tag_control", None), {AA.R}),
        ECA(IntField("upstream_igmp_rate", None), {AA.R}),
        ECA(StrFixedLenField("dynamic_acl_table", None, 30), {AA.R}),
        ECA(StrFixedLenField("static_acl_table", None, 30), {AA.R}),
        ECA(StrFixedLenField("lost_groups_list_table", None, 16), {AA.R}),
        ECA(ByteField("robustness", None), {AA.R}),
        ECA(StrFixedLenField("querier_ip_address", None, 16), {AA.R}),
        ECA(IntField("querier_interval", None), {AA.R}),
        ECA(IntField("querier_max_response_time", None), {AA.R}),
        ECA(IntField("last_member_query_interval", None), {AA.R}),
        ECA(ByteField("unauthorized_join_request", None), {AA.R}),
        ECA(StrFixedLenField("downstream_igmp_tci", None, 3), {AA.R}),
    ]


# entity class lookup table from entity_class values
entity_classes_name_map = dict(
    inspect.getmembers(sys.modules[__name__],
    lambda o: inspect.isclass(o) and \
              issubclass(o, EntityClass) and \
              o is not EntityClass)
)

entity_classes = [c for c in entity_classes_name_map.values()]
entity_id_to_class_map = dict((c.class_id, c) for c in entity_classes)


def reserved_class_name(class_id):
    """Name of a class id that has no definition in the table"""
    if 172 <= class_id <= 239:
        return 'reserved for future B-PON managed entities'
    elif 240 <= class_id <= 255:
        return 'reserved for vendor-specific managed entities'
    elif 350 <= class_id <= 399:
        return 'reserved for vendor-specific use'
    elif 462 <= class_id <= 65279:
        return 'reserved for future standardization'
    elif 65280 <= class_id <= 65535:
        return 'reserved for vendor-specific use'
    return 'unclassified ({})'.format(class_id)


@lru_cache(maxsize=1024)
def _reserved_entity_class(class_id):
    return EntityClassMeta('ReservedEntityClass{}'.format(class_id),
                           (EntityClass,),
                           dict(class_id=class_id,
                                class_name=reserved_class_name(class_id),
                                reserved=True,
                                attributes=[
                                    ECA(ShortField("managed_entity_id", None),
                                        {AA.R}),
                                ]))


def entity_class_for(class_id):
    """
    Look up the managed entity class for a class id. Never fails: ids that
    are not in the table resolve to a reserved class without attributes.
    """
    entity_class = entity_id_to_class_map.get(class_id)
    if entity_class is None:
        entity_class = _reserved_entity_class(class_id)
    return entity_class
