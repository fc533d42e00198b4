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
from unittest import TestCase, main

from scapy.fields import ShortField

from omcidecoder.omci_defs import AttributeAccess
from omcidecoder.omci_entities import EntityClass, CircuitPack, OntData, \
    AniG, Tcont, GemPortNetworkCtp, MacBridgeServiceProfile, \
    entity_classes, entity_id_to_class_map, entity_class_for, \
    EntityClassAttribute as ECA, reserved_class_name


class TestEntityClass(TestCase):

    def test_attribute_indices_from_mask(self):

        f = EntityClass.attribute_indices_from_mask
        self.assertEqual(f(0), [])
        self.assertEqual(f(0x8000), [1])
        self.assertEqual(f(0x0001), [16])
        self.assertEqual(f(0x800), [5])
        self.assertEqual(f(0xf000), [1, 2, 3, 4])
        self.assertEqual(f(0xf804), [1, 2, 3, 4, 5, 14])
        self.assertEqual(f(0xffff), list(range(1, 17)))

    def test_omci_mask_value_gen(self):
        cls = CircuitPack
        self.assertEqual(cls.mask_for('vendor_id'), 0x800)
        self.assertEqual(
            cls.mask_for('vendor_id', 'bridged_or_ip_ind'), 0x900)
        self.assertEqual(cls.attribute_indices_from_mask(
            cls.mask_for('type', 'power_shed_override')), [1, 14])

    def test_attribute_name_to_index_map(self):
        m = CircuitPack.attribute_name_to_index_map
        self.assertEqual(m['managed_entity_id'], 0)
        self.assertEqual(m['type'], 1)
        self.assertEqual(m['vendor_id'], 5)

    def test_attribute_properties(self):
        attributes = CircuitPack.attributes
        self.assertEqual(attributes[1].name, 'type')
        self.assertEqual(attributes[1].length, 1)
        self.assertTrue(attributes[1].settable_on_create)
        self.assertIn(AttributeAccess.Writable, attributes[1].access)

        self.assertEqual(attributes[2].name, 'number_of_ports')
        self.assertFalse(attributes[2].settable_on_create)
        self.assertEqual(attributes[2].access, {AttributeAccess.Readable})

        self.assertEqual(attributes[3].name, 'serial_number')
        self.assertEqual(attributes[3].length, 8)
        self.assertEqual(attributes[4].length, 14)
        self.assertEqual(attributes[14].length, 4)
        self.assertEqual(Tcont.attributes[1].length, 2)

    def test_attribute_default_access_is_empty(self):
        attribute = ECA(ShortField("counter", None))
        self.assertEqual(attribute.access, frozenset())
        self.assertFalse(attribute.settable_on_create)
        self.assertFalse(hasattr(attribute, "optional"))

    def test_select_attributes(self):
        selected, undefined = CircuitPack.select_attributes(0xf000, 3)
        self.assertEqual([s.index for s in selected], [1, 2, 3, 4])
        self.assertEqual([s.attribute.name for s in selected],
                         ['type', 'number_of_ports', 'serial_number',
                          'version'])
        self.assertEqual([s.offset for s in selected], [3, 4, 5, 13])
        self.assertEqual(undefined, [])

    def test_select_attributes_beyond_schema(self):
        selected, undefined = CircuitPack.select_attributes(0x0803)
        self.assertEqual([s.attribute.name for s in selected], ['vendor_id'])
        self.assertEqual(undefined, [15, 16])

        selected, undefined = OntData.select_attributes(0xffff)
        self.assertEqual([s.attribute.name for s in selected],
                         ['mib_data_sync'])
        self.assertEqual(undefined, list(range(2, 17)))

    def test_create_attributes(self):
        selected = GemPortNetworkCtp.create_attributes()
        self.assertEqual(
            [(s.attribute.name, s.offset) for s in selected],
            [('port_id_value', 0),
             ('t_cont_pointer', 2),
             ('direction', 4),
             ('traffic_management_pointer_for_upstream', 5),
             ('traffic_descriptor_profile_pointer', 7),
             ('priority_queue_pointer_for_downstream', 9),
             ('traffic_descriptor_profile_pointer_for_downstream', 11),
             ('encryption_key_ring', 13)])

        # managed_entity_id is never part of the list
        self.assertNotIn(0, [s.index for s in
                             MacBridgeServiceProfile.create_attributes()])
        self.assertEqual(Tcont.create_attributes(), [])

    def test_alarm_names(self):
        self.assertEqual(AniG.alarm_name(0), 'Low received optical power')
        self.assertEqual(AniG.alarm_name(2), 'Signal fail')
        self.assertIsNone(AniG.alarm_name(100))
        self.assertIsNone(Tcont.alarm_name(0))


class TestEntityRegistry(TestCase):

    def test_class_ids_are_unique(self):
        self.assertEqual(len(entity_classes), 82)
        self.assertEqual(len(entity_id_to_class_map), len(entity_classes))

    def test_schema_shape(self):
        for cls in entity_classes:
            self.assertFalse(cls.reserved, cls.__name__)
            self.assertEqual(cls.attributes[0].name, 'managed_entity_id',
                             cls.__name__)
            self.assertLessEqual(cls.attribute_count(), 16, cls.__name__)
            names = [a.name for a in cls.attributes]
            self.assertEqual(len(names), len(set(names)), cls.__name__)

    def test_lookup(self):
        self.assertIs(entity_class_for(2), OntData)
        self.assertIs(entity_class_for(6), CircuitPack)
        self.assertIs(entity_class_for(263), AniG)
        self.assertEqual(entity_class_for(6).class_name, 'Circuit Pack')
        self.assertEqual(entity_class_for(263).class_name, 'ANI-G')

    def test_reserved_ranges(self):
        b_pon = 'reserved for future B-PON managed entities'
        vendor_me = 'reserved for vendor-specific managed entities'
        vendor_use = 'reserved for vendor-specific use'
        future = 'reserved for future standardization'

        for class_id, name in ((172, b_pon), (200, b_pon), (239, b_pon),
                               (240, vendor_me), (255, vendor_me),
                               (350, vendor_use), (399, vendor_use),
                               (462, future), (1000, future), (65279, future),
                               (65280, vendor_use), (65535, vendor_use)):
            cls = entity_class_for(class_id)
            self.assertEqual(cls.class_name, name, class_id)
            self.assertEqual(reserved_class_name(class_id), name)
            self.assertEqual(cls.class_id, class_id)
            self.assertTrue(cls.reserved)
            self.assertEqual(cls.attribute_count(), 0)

    def test_table_wins_over_reserved_range(self):
        # 65531 lies in the vendor-specific range but is defined
        cls = entity_class_for(65531)
        self.assertFalse(cls.reserved)
        self.assertNotEqual(cls.class_name, 'reserved for vendor-specific use')

    def test_lookup_is_total(self):
        for class_id in range(0, 0x10000, 97):
            cls = entity_class_for(class_id)
            self.assertTrue(cls.class_name)
            self.assertEqual(cls.class_id, class_id)

    def test_unclassified_ids(self):
        cls = entity_class_for(400)
        self.assertTrue(cls.reserved)
        self.assertEqual(cls.class_name, 'unclassified (400)')

    def test_reserved_classes_are_shared(self):
        self.assertIs(entity_class_for(201), entity_class_for(201))
        self.assertNotIn(201, entity_id_to_class_map)

    def test_reserved_class_selects_nothing(self):
        selected, undefined = entity_class_for(201).select_attributes(0xc000)
        self.assertEqual(selected, [])
        self.assertEqual(undefined, [1, 2])


if __name__ == '__main__':
    main()
