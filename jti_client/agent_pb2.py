# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: agent.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x0b\x61gent.proto\x12\ttelemetry\"\xaa\x01\n\x13SubscriptionRequest\x12+\n\x05input\x18\x01 \x01(\x0b\x32\x1c.telemetry.SubscriptionInput\x12\"\n\tpath_list\x18\x02 \x03(\x0b\x32\x0f.telemetry.Path\x12\x42\n\x11\x61\x64\x64itional_config\x18\x03 \x01(\x0b\x32\'.telemetry.SubscriptionAdditionalConfig\"A\n\x11SubscriptionInput\x12,\n\x0e\x63ollector_list\x18\x01 \x03(\x0b\x32\x14.telemetry.Collector\"*\n\tCollector\x12\x0f\n\x07\x61\x64\x64ress\x18\x01 \x01(\t\x12\x0c\n\x04port\x18\x02 \x01(\r\"\x89\x01\n\x04Path\x12\x0c\n\x04path\x18\x01 \x01(\t\x12\x0e\n\x06\x66ilter\x18\x02 \x01(\t\x12\x1a\n\x12suppress_unchanged\x18\x03 \x01(\x08\x12\x1b\n\x13max_silent_interval\x18\x04 \x01(\r\x12\x18\n\x10sample_frequency\x18\x05 \x01(\r\x12\x10\n\x08need_eom\x18\x06 \x01(\x08\"c\n\x1cSubscriptionAdditionalConfig\x12\x15\n\rlimit_records\x18\x01 \x01(\x05\x12\x1a\n\x12limit_time_seconds\x18\x02 \x01(\x05\x12\x10\n\x08need_eos\x18\x03 \x01(\x08\"j\n\x11SubscriptionReply\x12\x31\n\x08response\x18\x01 \x01(\x0b\x32\x1f.telemetry.SubscriptionResponse\x12\"\n\tpath_list\x18\x02 \x03(\x0b\x32\x0f.telemetry.Path\"/\n\x14SubscriptionResponse\x12\x17\n\x0fsubscription_id\x18\x01 \x01(\r\"\x85\x02\n\x0eOpenConfigData\x12\x11\n\tsystem_id\x18\x01 \x01(\t\x12\x14\n\x0c\x63omponent_id\x18\x02 \x01(\r\x12\x18\n\x10sub_component_id\x18\x03 \x01(\r\x12\x0c\n\x04path\x18\x04 \x01(\t\x12\x17\n\x0fsequence_number\x18\x05 \x01(\x04\x12\x11\n\ttimestamp\x18\x06 \x01(\x04\x12\x1f\n\x02kv\x18\x07 \x03(\x0b\x32\x13.telemetry.KeyValue\x12!\n\x06\x64\x65lete\x18\x08 \x03(\x0b\x32\x11.telemetry.Delete\x12\x1b\n\x03\x65om\x18\t \x03(\x0b\x32\x0e.telemetry.Eom\x12\x15\n\rsync_response\x18\n \x01(\x08\"\xbb\x01\n\x08KeyValue\x12\x0b\n\x03key\x18\x01 \x01(\t\x12\x16\n\x0c\x64ouble_value\x18\x05 \x01(\x01H\x00\x12\x13\n\tint_value\x18\x06 \x01(\x03H\x00\x12\x14\n\nuint_value\x18\x07 \x01(\x04H\x00\x12\x14\n\nsint_value\x18\x08 \x01(\x12H\x00\x12\x14\n\nbool_value\x18\t \x01(\x08H\x00\x12\x13\n\tstr_value\x18\n \x01(\tH\x00\x12\x15\n\x0b\x62ytes_value\x18\x0b \x01(\x0cH\x00\x42\x07\n\x05value\"\x16\n\x06\x44\x65lete\x12\x0c\n\x04path\x18\x01 \x01(\t\"\x13\n\x03\x45om\x12\x0c\n\x04path\x18\x01 \x01(\t\"4\n\x19\x43\x61ncelSubscriptionRequest\x12\x17\n\x0fsubscription_id\x18\x01 \x01(\r\"P\n\x17\x43\x61ncelSubscriptionReply\x12#\n\x04\x63ode\x18\x01 \x01(\x0e\x32\x15.telemetry.ReturnCode\x12\x10\n\x08\x63ode_str\x18\x02 \x01(\t\"2\n\x17GetSubscriptionsRequest\x12\x17\n\x0fsubscription_id\x18\x01 \x01(\r\"P\n\x15GetSubscriptionsReply\x12\x37\n\x11subscription_list\x18\x01 \x03(\x0b\x32\x1c.telemetry.SubscriptionReply\"c\n\x1aGetOperationalStateRequest\x12\x17\n\x0fsubscription_id\x18\x01 \x01(\r\x12,\n\tverbosity\x18\x02 \x01(\x0e\x32\x19.telemetry.VerbosityLevel\";\n\x18GetOperationalStateReply\x12\x1f\n\x02kv\x18\x01 \x03(\x0b\x32\x13.telemetry.KeyValue\"\x15\n\x13\x44\x61taEncodingRequest\"C\n\x11\x44\x61taEncodingReply\x12.\n\rencoding_list\x18\x01 \x03(\x0e\x32\x17.telemetry.EncodingType*G\n\nReturnCode\x12\x0b\n\x07SUCCESS\x10\x00\x12\x19\n\x15NO_SUBSCRIPTION_ENTRY\x10\x01\x12\x11\n\rUNKNOWN_ERROR\x10\x02*2\n\x0eVerbosityLevel\x12\n\n\x06\x44\x45TAIL\x10\x00\x12\t\n\x05TERSE\x10\x01\x12\t\n\x05\x42RIEF\x10\x02*A\n\x0c\x45ncodingType\x12\r\n\tUNDEFINED\x10\x00\x12\x07\n\x03XML\x10\x01\x12\r\n\tJSON_IETF\x10\x02\x12\n\n\x06PROTO3\x10\x03\x32\xfc\x03\n\x13OpenConfigTelemetry\x12S\n\x12telemetrySubscribe\x12\x1e.telemetry.SubscriptionRequest\x1a\x19.telemetry.OpenConfigData\"\x00\x30\x01\x12i\n\x1b\x63\x61ncelTelemetrySubscription\x12$.telemetry.CancelSubscriptionRequest\x1a\".telemetry.CancelSubscriptionReply\"\x00\x12\x63\n\x19getTelemetrySubscriptions\x12\".telemetry.GetSubscriptionsRequest\x1a .telemetry.GetSubscriptionsReply\"\x00\x12l\n\x1cgetTelemetryOperationalState\x12%.telemetry.GetOperationalStateRequest\x1a#.telemetry.GetOperationalStateReply\"\x00\x12R\n\x10getDataEncodings\x12\x1e.telemetry.DataEncodingRequest\x1a\x1c.telemetry.DataEncodingReply\"\x00\x62\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'agent_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _RETURNCODE._serialized_start=1731
  _RETURNCODE._serialized_end=1802
  _VERBOSITYLEVEL._serialized_start=1804
  _VERBOSITYLEVEL._serialized_end=1854
  _ENCODINGTYPE._serialized_start=1856
  _ENCODINGTYPE._serialized_end=1921
  _SUBSCRIPTIONREQUEST._serialized_start=27
  _SUBSCRIPTIONREQUEST._serialized_end=197
  _SUBSCRIPTIONINPUT._serialized_start=199
  _SUBSCRIPTIONINPUT._serialized_end=264
  _COLLECTOR._serialized_start=266
  _COLLECTOR._serialized_end=308
  _PATH._serialized_start=311
  _PATH._serialized_end=448
  _SUBSCRIPTIONADDITIONALCONFIG._serialized_start=450
  _SUBSCRIPTIONADDITIONALCONFIG._serialized_end=549
  _SUBSCRIPTIONREPLY._serialized_start=551
  _SUBSCRIPTIONREPLY._serialized_end=657
  _SUBSCRIPTIONRESPONSE._serialized_start=659
  _SUBSCRIPTIONRESPONSE._serialized_end=706
  _OPENCONFIGDATA._serialized_start=709
  _OPENCONFIGDATA._serialized_end=970
  _KEYVALUE._serialized_start=973
  _KEYVALUE._serialized_end=1160
  _DELETE._serialized_start=1162
  _DELETE._serialized_end=1184
  _EOM._serialized_start=1186
  _EOM._serialized_end=1205
  _CANCELSUBSCRIPTIONREQUEST._serialized_start=1207
  _CANCELSUBSCRIPTIONREQUEST._serialized_end=1259
  _CANCELSUBSCRIPTIONREPLY._serialized_start=1261
  _CANCELSUBSCRIPTIONREPLY._serialized_end=1341
  _GETSUBSCRIPTIONSREQUEST._serialized_start=1343
  _GETSUBSCRIPTIONSREQUEST._serialized_end=1393
  _GETSUBSCRIPTIONSREPLY._serialized_start=1395
  _GETSUBSCRIPTIONSREPLY._serialized_end=1475
  _GETOPERATIONALSTATEREQUEST._serialized_start=1477
  _GETOPERATIONALSTATEREQUEST._serialized_end=1576
  _GETOPERATIONALSTATEREPLY._serialized_start=1578
  _GETOPERATIONALSTATEREPLY._serialized_end=1637
  _DATAENCODINGREQUEST._serialized_start=1639
  _DATAENCODINGREQUEST._serialized_end=1660
  _DATAENCODINGREPLY._serialized_start=1662
  _DATAENCODINGREPLY._serialized_end=1729
  _OPENCONFIGTELEMETRY._serialized_start=1924
  _OPENCONFIGTELEMETRY._serialized_end=2432
# @@protoc_insertion_point(module_scope)
