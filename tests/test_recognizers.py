"""Tests for the token shape recognizers."""

from logstruct.syntax import recognizers


class TestPosint:
    def test_full_match(self):
        assert recognizers.posint("12345") == 5

    def test_partial_match(self):
        assert recognizers.posint("12ab") == 2

    def test_no_match(self):
        assert recognizers.posint("ab12") == 0
        assert recognizers.posint("") == 0

    def test_offset(self):
        assert recognizers.posint("x/24", 2) == 2


class TestTimes:
    def test_time_24hr(self):
        assert recognizers.time_24hr("23:59:59") == 8

    def test_time_24hr_out_of_range(self):
        assert recognizers.time_24hr("24:00:00") == 0
        assert recognizers.time_24hr("12:60:00") == 0

    def test_time_24hr_needs_two_digit_hour(self):
        assert recognizers.time_24hr("1:00:00") == 0

    def test_duration(self):
        assert recognizers.duration("1:02:03") == 7
        assert recognizers.duration("100:00:00") == 9

    def test_duration_out_of_range(self):
        assert recognizers.duration("1:60:00") == 0


class TestIPv4:
    def test_address(self):
        assert recognizers.ipv4("192.168.0.1") == 11

    def test_octet_too_large(self):
        assert recognizers.ipv4("256.1.1.1") == 0

    def test_too_few_octets(self):
        assert recognizers.ipv4("1.2.3") == 0

    def test_prefix_length_not_consumed(self):
        assert recognizers.ipv4("10.0.0.1/24") == 8


class TestDates:
    def test_rfc3164(self):
        assert recognizers.rfc3164_date("Oct 11 22:14:15 host") == 15

    def test_rfc3164_padded_day_any_case(self):
        assert recognizers.rfc3164_date("oct  1 22:14:15") == 15

    def test_rfc3164_with_year(self):
        assert recognizers.rfc3164_date("Oct 11 2015 22:14:15") == 20

    def test_rfc3164_invalid(self):
        assert recognizers.rfc3164_date("Foo 11 22:14:15") == 0
        assert recognizers.rfc3164_date("Oct 32 22:14:15") == 0

    def test_rfc3164_offset(self):
        assert recognizers.rfc3164_date("at Oct 11 22:14:15", 3) == 15

    def test_rfc5424(self):
        assert recognizers.rfc5424_date("2003-10-11T22:14:15.003Z") == 24

    def test_rfc5424_with_offset(self):
        assert recognizers.rfc5424_date("1985-04-12T23:20:50.52+02:00") == 28

    def test_rfc5424_invalid(self):
        assert recognizers.rfc5424_date("2003-13-11T22:14:15Z") == 0
        assert recognizers.rfc5424_date("2003-10-11T22:14:15") == 0
