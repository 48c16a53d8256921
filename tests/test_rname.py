# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# Copyright 2018 by Tmcvisa Authors, see AUTHORS for more details.
#
# Distributed under the terms of the BSD license.
#
# The full license is in the file LICENCE, distributed with this software.
# -----------------------------------------------------------------------------
"""Test the parsing and assembling of resource names.

"""
import pickle

import pytest

from tmcvisa.errors import (InvalidResourceName, MalformedResourceName,
                            UnsupportedInterfaceType,
                            UnsupportedResourceClass, InvalidBoardIndex,
                            InvalidManufacturerID, InvalidModelCode,
                            InvalidInterfaceIndex)
from tmcvisa.rname import (NOT_SPECIFIED, ResourceIdentifier,
                           parse_resource_name, assemble_resource_name,
                           to_canonical_name, parse_unsigned)


def test_parsing_full_resource_name():
    """Test parsing a resource name specifying every field.

    """
    rid = parse_resource_name('USB0::0x1234::0x5678::A12345::0::INSTR')
    assert rid.resource_name == 'USB0::0x1234::0x5678::A12345::0::INSTR'
    assert rid.interface_type == 'USB'
    assert rid.board == 0
    assert rid.manufacturer_id == 0x1234
    assert rid.model_code == 0x5678
    assert rid.serial_number == 'A12345'
    assert rid.usb_interface_number == 0
    assert rid.resource_class == 'INSTR'


def test_parsing_without_serial_number():
    """Test that the serial number segment is optional.

    """
    rid = parse_resource_name('USB::0x1234::0x5678::0::INSTR')
    assert rid.serial_number == ''
    assert rid.usb_interface_number == 0
    assert rid.board == NOT_SPECIFIED
    assert rid.manufacturer_id == 0x1234
    assert rid.model_code == 0x5678


def test_numeric_serial_number_is_not_taken_for_interface():
    """A single numeric field after the model code is the interface number.

    """
    rid = parse_resource_name('USB0::0x1234::0x5678::123::INSTR')
    assert rid.serial_number == ''
    assert rid.usb_interface_number == 123

    rid = parse_resource_name('USB0::0x1234::0x5678::123::4::INSTR')
    assert rid.serial_number == '123'
    assert rid.usb_interface_number == 4


def test_empty_interface_number():
    """Test that an empty interface number field is left unspecified.

    """
    rid = parse_resource_name('USB0::0x1234::0x5678::SN::::INSTR')
    assert rid.serial_number == 'SN'
    assert rid.usb_interface_number == NOT_SPECIFIED


@pytest.mark.parametrize('name', ['usb0::0x1234::0x5678::SN::0::instr',
                                  'Usb0::0x1234::0x5678::SN::0::Instr'])
def test_literals_are_case_insensitive(name):
    """Test that interface type and resource class are normalized.

    """
    rid = parse_resource_name(name)
    assert rid.interface_type == 'USB'
    assert rid.resource_class == 'INSTR'
    assert rid.canonical_name == 'USB0::0x1234::0x5678::SN::0::INSTR'


def test_hexadecimal_and_decimal_ids_are_equivalent():
    """Test that the base of the numeric fields does not matter.

    """
    hexa = parse_resource_name('USB0::0x1234::0x5678::SN::0::INSTR')
    deci = parse_resource_name('USB0::4660::22136::SN::0::INSTR')
    assert hexa.manufacturer_id == deci.manufacturer_id == 4660
    assert hexa.model_code == deci.model_code == 22136
    assert hexa.canonical_name == deci.canonical_name


@pytest.mark.parametrize('name', ['GPIB0::0x1234::0x5678::A12345::0::INSTR',
                                  'TCPIP::0x1234::0x5678::0::INSTR',
                                  'USBX::0x1234::0x5678::0::INSTR'])
def test_unsupported_interface_type(name):
    """Test that only USB resource names are accepted.

    """
    with pytest.raises(UnsupportedInterfaceType) as e:
        parse_resource_name(name)
    assert e.value.resource_name == name


@pytest.mark.parametrize('name', ['USB0::0x1234::0x5678::A12345::0::SOCKET',
                                  'USB0::0x1234::0x5678::0::RAW'])
def test_unsupported_resource_class(name):
    """Test that only INSTR resource names are accepted.

    """
    with pytest.raises(UnsupportedResourceClass):
        parse_resource_name(name)


@pytest.mark.parametrize('name', ['',
                                  'USB0',
                                  'USB0::0x1234::INSTR',
                                  'USB0::0x1234::0x5678::INSTR',
                                  '0::0x1234::0x5678::0::INSTR',
                                  'USB0::0x1234::0x5678::S N::0::INSTR',
                                  'USB0::0x1234::0x5678::SN::a::INSTR',
                                  'USB0::0x1234::0x5678::SN::0::INSTR\n',
                                  ' USB0::0x1234::0x5678::SN::0::INSTR'])
def test_malformed_resource_name(name):
    """Test that text not following the syntax is rejected as a whole.

    """
    with pytest.raises(MalformedResourceName):
        parse_resource_name(name)


@pytest.mark.parametrize('serial', ['A\x0b1', 'A\u00a01', 'A\u20031'])
def test_serial_number_with_other_whitespace(serial):
    """Test that only tab, newline, form feed, return and space split tokens.

    """
    rid = parse_resource_name('USB0::0x1234::0x5678::%s::0::INSTR' % serial)
    assert rid.serial_number == serial
    assert rid.canonical_name == rid.resource_name


@pytest.mark.parametrize('char', ['\t', '\n', '\f', '\r', ' '])
def test_serial_number_with_ascii_space(char):
    """Test that the whitespace forbidden by the syntax is rejected.

    """
    with pytest.raises(MalformedResourceName):
        parse_resource_name('USB0::0x1234::0x5678::A%s1::0::INSTR' % char)


def test_interface_type_is_checked_before_numeric_fields():
    """Test that the first failing field is reported.

    """
    with pytest.raises(UnsupportedInterfaceType):
        parse_resource_name('GPIB0::0xZZZZ::0x5678::0::SOCKET')
    with pytest.raises(InvalidManufacturerID):
        parse_resource_name('USB0::0xZZZZ::0xZZZZ::0::SOCKET')


@pytest.mark.parametrize('name, error, field',
                         [('USB65536::0x1234::0x5678::0::INSTR',
                           InvalidBoardIndex, '65536'),
                          ('USB0::0xG234::0x5678::0::INSTR',
                           InvalidManufacturerID, '0xG234'),
                          ('USB0::0x10000::0x5678::0::INSTR',
                           InvalidManufacturerID, '0x10000'),
                          ('USB0::-1::0x5678::0::INSTR',
                           InvalidManufacturerID, '-1'),
                          ('USB0::0x1234::vxi::0::INSTR',
                           InvalidModelCode, 'vxi'),
                          ('USB0::0x1234::0x::0::INSTR',
                           InvalidModelCode, '0x'),
                          ('USB0::0x1234::0x5678::SN::1024::INSTR',
                           InvalidInterfaceIndex, '1024')])
def test_invalid_numeric_fields(name, error, field):
    """Test that each numeric field reports its own error.

    """
    with pytest.raises(error) as e:
        parse_resource_name(name)
    assert isinstance(e.value, InvalidResourceName)
    assert isinstance(e.value, ValueError)
    assert e.value.field == field
    assert field in str(e.value)


def test_numeric_field_limits():
    """Test the largest values accepted for each numeric field.

    """
    rid = parse_resource_name('USB65535::0xffff::65535::SN::1023::INSTR')
    assert rid.board == 65535
    assert rid.manufacturer_id == 0xffff
    assert rid.model_code == 0xffff
    assert rid.usb_interface_number == 1023


def test_parse_unsigned():
    """Test the integer decoding used for numeric fields.

    """
    assert parse_unsigned('0x1A', 16) == 26
    assert parse_unsigned('0X1a', 16) == 26
    assert parse_unsigned('0o17', 16) == 15
    assert parse_unsigned('0b101', 16) == 5
    assert parse_unsigned('010', 16) == 10
    assert parse_unsigned('010', 10, base=10) == 10
    for text in ('', '+1', ' 1', '1_000', '1.0', '0x'):
        with pytest.raises(ValueError):
            parse_unsigned(text, 16)
    with pytest.raises(ValueError):
        parse_unsigned('0x10', 10, base=10)
    with pytest.raises(ValueError):
        parse_unsigned('256', 8)


@pytest.mark.parametrize('name',
                         ['USB0::0x1234::0x5678::A12345::0::INSTR',
                          'USB::0x1234::0x5678::0::INSTR',
                          'USB1::0x0957::0x1755::MY12345678::2::INSTR',
                          'USB0::0x1ab1::0x04ce::DS1ZA1234::::INSTR'])
def test_rendering_normalized_names_is_idempotent(name):
    """Test that normalized resource names are reproduced identically.

    """
    assert to_canonical_name(name) == name
    assert str(parse_resource_name(name)) == name


def test_assemble_resource_name():
    """Test building a resource name from its fields.

    """
    assert (assemble_resource_name(0x1ab1, 0x4ce, 'DS1ZA', 0) ==
            'USB0::0x1ab1::0x04ce::DS1ZA::0::INSTR')
    assert (assemble_resource_name(1, 2, board=NOT_SPECIFIED) ==
            'USB::0x0001::0x0002::::INSTR')


def test_identifier_is_an_immutable_value():
    """Test that identifiers compare by value and cannot be modified.

    """
    a = parse_resource_name('USB0::0x1234::0x5678::SN::0::INSTR')
    b = parse_resource_name('USB0::0x1234::0x5678::SN::0::INSTR')
    assert a == b
    assert hash(a) == hash(b)
    with pytest.raises(AttributeError):
        a.serial_number = 'other'
    with pytest.raises(TypeError):
        ResourceIdentifier('USB0::0x1234::0x5678::SN::0::INSTR')


def test_parse_errors_can_be_pickled():
    """Test that errors survive being sent to another process.

    """
    with pytest.raises(InvalidModelCode) as e:
        parse_resource_name('USB0::0x1234::vxi::0::INSTR')
    clone = pickle.loads(pickle.dumps(e.value))
    assert type(clone) is InvalidModelCode
    assert clone.field == 'vxi'
    assert str(clone) == str(e.value)
