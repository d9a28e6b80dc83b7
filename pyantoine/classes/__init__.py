from .classes import root_method, vle_phase, class_dic
